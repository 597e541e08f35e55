SECRET_KEY = "test-secret"

API_BASE_URL = "http://spot.test/api"
API_TIMEOUT = 5.0

# Empty path keeps notifications in memory.
NOTIFICATIONS_PATH = ""

DEBUG = False
TESTING = True
ENVIRONMENT = "testing"
