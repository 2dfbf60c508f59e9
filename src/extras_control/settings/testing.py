SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

EXPECTED_ARRIVAL = "08:00"
VALOR_DIARIA = 130.0

SEED_DEMO_DATA = False
