"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEOUT_SECONDS = 10
DEFAULT_MYSQL_PORT = 3306

SHEET_NAME_SUFFIX = "Attendance Sheet"
GOOGLE_SHEETS_HOST = "docs.google.com"
GOOGLE_SHEETS_PATH = "/spreadsheets/"

MSG_INVALID_CREDENTIALS = "Invalid login credentials. Please check your login ID and password."
MSG_STORE_UNAVAILABLE = "Unable to reach the attendance database. Please try again."
MSG_NO_SHEET_LINKS = "No class sections available. Please contact your administrator."
MSG_NO_SCHOOL = "School information unavailable. Some features may be limited. Please contact your administrator."
SCHOOL_NAME_UNAVAILABLE = "School Name Unavailable"

# Idle logins are dropped from the in-memory registry after this long.
DEFAULT_SESSION_IDLE_SECONDS = 8 * 60 * 60
