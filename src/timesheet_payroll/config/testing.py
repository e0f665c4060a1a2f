import os

LOCALE = "ru"
ADMINISTRATOR_KEYWORD = "администратор"

ADVANCE_CUTOFF_DAY = 15
DEFAULT_PAYMENT_METHOD = "card"
BUDGET_TOLERANCE = 0.05

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_JSON = False
TESTING = True
