import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

# Horário de referência para o relatório de pontualidade
EXPECTED_ARRIVAL = os.getenv("EXPECTED_ARRIVAL", "08:00")

# Valor padrão da diária usado no cálculo de saldo de extras
VALOR_DIARIA = float(os.getenv("VALOR_DIARIA", "130"))

# Load a few demo requests on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))
