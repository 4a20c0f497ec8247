import os

from config.config import db_config_from_env

SECRET_KEY = "test-secret"

STORE_BACKEND = "file"
STORE_PATH = os.getenv("STORE_PATH", "instance/fieldforce_test_store.json")
STORAGE_KEY = "truthface_db"

DB_CONFIG = db_config_from_env()

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

GEO_HIGH_ACCURACY = True
GEO_TIMEOUT_MS = 10000
LOCATION_POLL_SECONDS = 60
MAP_DEFAULT_CENTER = None

AUTO_INIT_DB = False
