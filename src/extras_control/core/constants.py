"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Jornada padrão (7h20) usada como divisor do valor/hora.
HOURS_PER_STANDARD_SHIFT = 7 + 20 / 60
MINUTES_PER_DAY = 24 * 60

# Centavos a partir dos quais o valor arredonda para cima.
MONEY_ROUND_UP_CENTS = 56

DEFAULT_EXPECTED_ARRIVAL = "08:00"
DEFAULT_VALOR_DIARIA = 130.0
DEFAULT_LIST_LIMIT = 500

URGENCY_APPROVER = "SISTEMA (URGÊNCIA)"
DEFAULT_PORTARIA_USER = "Portaria"

EXCEL_SHEET_NAME_MAX = 31
