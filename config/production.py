import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

SUPABASE_CONFIG = {
    "url": os.getenv("SUPABASE_URL", ""),
    "service_role_key": os.getenv("SUPABASE_SERVICE_ROLE_KEY", ""),
    "timeout": int(os.getenv("SUPABASE_TIMEOUT", "20")),
}

DEBUG = False

DEDUCT_TRAVEL_TIME = bool(int(os.getenv("DEDUCT_TRAVEL_TIME", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CORS_ORIGIN = os.getenv("CORS_ORIGIN", "*")
