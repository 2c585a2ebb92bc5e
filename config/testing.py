SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
DB_CONFIG = {}

OFFICE_LOCATION = None
GOOGLE_SHEETS = None

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
