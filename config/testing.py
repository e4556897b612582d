import os

SECRET_KEY = "test-secret"

DATABASE_URL = os.getenv("DATABASE_URL", "mysql://root@localhost:3306/teacher_portal_test")
DATABASE_KEY = os.getenv("DATABASE_KEY", "12345")
DB_TIMEOUT_SECONDS = 10

RELAY_URL = "https://script.example.test/exec"
RELAY_TIMEOUT_SECONDS = 10.0

STRICT_SCHOOL_CHECK = True
SESSION_IDLE_SECONDS = 60 * 60

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
