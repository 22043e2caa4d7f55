# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "locationtracker"
APP_TITLE = "Locations"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "settings.json"
DATA_FILE_NAME = "locationData.json"
FALLBACK_DATA_DIR_NAME = ".locationtracker"

ENV_DATA_DIR = "LOCATIONTRACKER_DATA_DIR"
ENV_SEED_FILE = "LOCATIONTRACKER_SEED_FILE"
ENV_DEBUG = "LOCATIONTRACKER_DEBUG"

# Wire order of the persisted record keys.
LOCATION_FIELDS = (
    "id",
    "name",
    "category",
    "city",
    "state",
    "park",
    "description",
    "imageName",
    "isCompleted",
)

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg")
