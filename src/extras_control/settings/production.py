import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

EXPECTED_ARRIVAL = os.getenv("EXPECTED_ARRIVAL", "08:00")
VALOR_DIARIA = float(os.getenv("VALOR_DIARIA", "130"))

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))
