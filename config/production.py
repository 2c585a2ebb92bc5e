import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker"),
}

OFFICE_LOCATION = {
    "latitude": float(os.getenv("OFFICE_LATITUDE", "28.6611056")),
    "longitude": float(os.getenv("OFFICE_LONGITUDE", "77.3457939")),
    "name": os.getenv("OFFICE_NAME", "Main Office"),
    "allowed_radius": float(os.getenv("OFFICE_RADIUS_METERS", "100")),
}

GOOGLE_SHEETS = {
    "spreadsheet_id": os.getenv("GOOGLE_SHEETS_SPREADSHEET_ID", ""),
    "api_key": os.getenv("GOOGLE_SHEETS_API_KEY", ""),
    "sheet_name": os.getenv("GOOGLE_SHEETS_SHEET_NAME", "Attendance Data"),
    "enabled": bool(int(os.getenv("GOOGLE_SHEETS_ENABLED", "0"))),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
