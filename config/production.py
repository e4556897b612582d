import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATABASE_URL = os.getenv("DATABASE_URL")
DATABASE_KEY = os.getenv("DATABASE_KEY")
DB_TIMEOUT_SECONDS = int(os.getenv("DB_TIMEOUT_SECONDS", "10"))

RELAY_URL = os.getenv("RELAY_URL", "")
RELAY_TIMEOUT_SECONDS = float(os.getenv("RELAY_TIMEOUT_SECONDS", "10"))

STRICT_SCHOOL_CHECK = bool(int(os.getenv("STRICT_SCHOOL_CHECK", "1")))

# Logins idle longer than this are dropped from memory
SESSION_IDLE_SECONDS = int(os.getenv("SESSION_IDLE_SECONDS", str(8 * 60 * 60)))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
