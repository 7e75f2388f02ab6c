import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# memory | json | mysql
STORE_BACKEND = os.getenv("STORE_BACKEND", "json")
STORE_PATH = os.getenv("STORE_PATH", "instance/store")
STORE_NAMESPACE = os.getenv("STORE_NAMESPACE", "clubhive")
# "legacy" reads browser-era camelCase documents, "hosted" the hosted-backend rows
STORE_LEGACY_FIELDS = os.getenv("STORE_LEGACY_FIELDS") or None

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "clubhive"),
}

# If enabled (mysql backend only), schema.sql is applied on startup
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Write the demo dataset into collections that do not exist yet
AUTO_SEED = bool(int(os.getenv("AUTO_SEED", "1")))

ENFORCE_CAPACITY = bool(int(os.getenv("ENFORCE_CAPACITY", "0")))
