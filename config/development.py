import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Keep response fields in the order the API builds them
JSON_SORT_KEYS = bool(int(os.getenv("JSON_SORT_KEYS", "0")))
