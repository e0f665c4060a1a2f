import os

LOCALE = os.getenv("PAYROLL_LOCALE", "ru")
ADMINISTRATOR_KEYWORD = os.getenv("PAYROLL_ADMIN_KEYWORD", "администратор")

ADVANCE_CUTOFF_DAY = int(os.getenv("PAYROLL_ADVANCE_CUTOFF_DAY", "15"))
DEFAULT_PAYMENT_METHOD = os.getenv("PAYROLL_DEFAULT_PAYMENT_METHOD", "card")
BUDGET_TOLERANCE = float(os.getenv("PAYROLL_BUDGET_TOLERANCE", "0.05"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "1")))
