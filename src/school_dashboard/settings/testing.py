SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

HOST = "127.0.0.1"
PORT = 5000

SEED_DEMO_DATA = True

RECENT_ACTIVITY_LIMIT = 10
