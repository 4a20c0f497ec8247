import os

from config.config import db_config_from_env, env_bool, env_center

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# "file" keeps the snapshot in a local JSON key-value file, "mysql" in the kv_store table
STORE_BACKEND = os.getenv("STORE_BACKEND", "file")
STORE_PATH = os.getenv("STORE_PATH", "instance/fieldforce_store.json")
STORAGE_KEY = os.getenv("STORAGE_KEY", "truthface_db")

DB_CONFIG = db_config_from_env()

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

GEO_HIGH_ACCURACY = env_bool("GEO_HIGH_ACCURACY", True)
GEO_TIMEOUT_MS = int(os.getenv("GEO_TIMEOUT_MS", "10000"))
LOCATION_POLL_SECONDS = int(os.getenv("LOCATION_POLL_SECONDS", "60"))
MAP_DEFAULT_CENTER = env_center("MAP_DEFAULT_CENTER")

# If enabled with STORE_BACKEND=mysql, the kv_store table is created on startup
AUTO_INIT_DB = env_bool("AUTO_INIT_DB", True)
