import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Required: mysql://user@host:port/dbname plus the store credential.
DATABASE_URL = os.getenv("DATABASE_URL")
DATABASE_KEY = os.getenv("DATABASE_KEY")
DB_TIMEOUT_SECONDS = int(os.getenv("DB_TIMEOUT_SECONDS", "10"))

# Google Apps Script web app receiving attendance submissions
RELAY_URL = os.getenv("RELAY_URL", "")
RELAY_TIMEOUT_SECONDS = float(os.getenv("RELAY_TIMEOUT_SECONDS", "10"))

# False: a teacher whose school row is missing still logs in, with a warning
STRICT_SCHOOL_CHECK = bool(int(os.getenv("STRICT_SCHOOL_CHECK", "1")))

# Logins idle longer than this are dropped from memory
SESSION_IDLE_SECONDS = int(os.getenv("SESSION_IDLE_SECONDS", str(8 * 60 * 60)))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
