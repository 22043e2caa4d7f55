# -*- coding: utf-8 -*-
"""Creates a per-user data file for manual GUI testing."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from locationtracker.constants import DATA_FILE_NAME
from locationtracker.models.location import Location, encode_locations
from locationtracker.utils.file_utils import write_json_file


def create_sample_data(data_dir: Path, completed_ids: tuple[int, ...] = (1, 3)) -> Path:
    samples = [
        (1, "Old Faithful", "Geyser", "West Yellowstone", "Wyoming", "Yellowstone National Park", "oldfaithful"),
        (2, "Half Dome", "Summit", "Yosemite Valley", "California", "Yosemite National Park", "halfdome"),
        (3, "Delicate Arch", "Arch", "Moab", "Utah", "Arches National Park", "delicatearch"),
        (4, "Missing Image Example", "Trail", "Nowhere", "Nevada", "Test Park", "does-not-exist"),
    ]
    locations = [
        Location(
            id=location_id,
            name=name,
            category=category,
            city=city,
            state=state,
            park=park,
            description=f"Sample entry for {name}.",
            image_name=image_name,
            is_completed=location_id in completed_ids,
        )
        for location_id, name, category, city, state, park, image_name in samples
    ]

    target = write_json_file(data_dir / DATA_FILE_NAME, encode_locations(locations))
    print(f"Created sample data at: {target.absolute()}")
    print(f"Start the app with LOCATIONTRACKER_DATA_DIR={data_dir.absolute()}")
    return target

if __name__ == "__main__":
    create_sample_data(Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd() / "sample_data")
