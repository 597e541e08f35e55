import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8080/api")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "15"))

NOTIFICATIONS_PATH = os.getenv("NOTIFICATIONS_PATH", "instance/notifications.json")

DEBUG = bool(int(os.getenv("DEBUG", "1")))
ENVIRONMENT = "development"
