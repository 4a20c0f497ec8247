import os

from config.config import db_config_from_env, env_bool, env_center

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql")
STORE_PATH = os.getenv("STORE_PATH", "instance/fieldforce_store.json")
STORAGE_KEY = os.getenv("STORAGE_KEY", "truthface_db")

DB_CONFIG = db_config_from_env()

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

GEO_HIGH_ACCURACY = env_bool("GEO_HIGH_ACCURACY", True)
GEO_TIMEOUT_MS = int(os.getenv("GEO_TIMEOUT_MS", "10000"))
LOCATION_POLL_SECONDS = int(os.getenv("LOCATION_POLL_SECONDS", "60"))
MAP_DEFAULT_CENTER = env_center("MAP_DEFAULT_CENTER")

AUTO_INIT_DB = env_bool("AUTO_INIT_DB", False)
