import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql")
STORE_PATH = os.getenv("STORE_PATH", "instance/store")
STORE_NAMESPACE = os.getenv("STORE_NAMESPACE", "clubhive")
STORE_LEGACY_FIELDS = os.getenv("STORE_LEGACY_FIELDS") or None

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "clubhive"),
}

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED = bool(int(os.getenv("AUTO_SEED", "0")))

ENFORCE_CAPACITY = bool(int(os.getenv("ENFORCE_CAPACITY", "0")))
