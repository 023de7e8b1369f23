import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SUPABASE_CONFIG = {
    "url": os.getenv("SUPABASE_URL", "http://localhost:54321"),
    "service_role_key": os.getenv("SUPABASE_SERVICE_ROLE_KEY", ""),
    "timeout": int(os.getenv("SUPABASE_TIMEOUT", "20")),
}

DEBUG = True

# Subtract each employee's travel time once per worked day in report net totals
DEDUCT_TRAVEL_TIME = bool(int(os.getenv("DEDUCT_TRAVEL_TIME", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
CORS_ORIGIN = os.getenv("CORS_ORIGIN", "*")
