import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timepay_db"),
}

SITE_CONFIG = {
    "latitude": float(os.getenv("SITE_LAT", "5.614818")),
    "longitude": float(os.getenv("SITE_LNG", "-0.205874")),
    "radius_m": float(os.getenv("SITE_RADIUS_M", "100")),
}

CHECKOUT_CUTOFF = os.getenv("CHECKOUT_CUTOFF", "18:00")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
