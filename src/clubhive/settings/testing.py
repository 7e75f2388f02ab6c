SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

# Every create_app() gets a fresh, seeded in-memory store.
STORE_BACKEND = "memory"
STORE_NAMESPACE = "clubhive"
STORE_LEGACY_FIELDS = None

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "clubhive_test",
}

AUTO_INIT_DB = False
AUTO_SEED = True

ENFORCE_CAPACITY = False
