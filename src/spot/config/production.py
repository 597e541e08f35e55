import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8080/api")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "15"))

NOTIFICATIONS_PATH = os.getenv("NOTIFICATIONS_PATH", "/var/lib/spot/notifications.json")
LOG_DIR = os.getenv("LOG_DIR", "/var/log/spot")

DEBUG = False
ENVIRONMENT = "production"
