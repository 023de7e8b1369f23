import os

SECRET_KEY = "test-secret"

SUPABASE_CONFIG = {
    "url": os.getenv("SUPABASE_URL", "http://supabase.test"),
    "service_role_key": os.getenv("SUPABASE_SERVICE_ROLE_KEY", "test-service-key"),
    "timeout": 5,
}

DEBUG = False
TESTING = True

DEDUCT_TRAVEL_TIME = False

LOG_LEVEL = "WARNING"
CORS_ORIGIN = "*"
