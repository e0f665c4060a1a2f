from __future__ import annotations

import importlib
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from ..core.constants import (
    DEFAULT_ADMINISTRATOR_KEYWORD,
    DEFAULT_ADVANCE_CUTOFF_DAY,
    DEFAULT_BUDGET_TOLERANCE,
    DEFAULT_LOCALE,
)
from ..core.enums import PaymentMethod


def get_settings_module(env: Optional[str] = None) -> str:
    # APP_ENV picks the settings module, development by default
    env = (env or os.getenv("APP_ENV", "development")).lower()

    if env in {"prod", "production"}:
        return f"{__name__}.production"

    if env in {"test", "testing"}:
        return f"{__name__}.testing"

    return f"{__name__}.development"


@dataclass(frozen=True)
class EngineSettings:
    locale: str = DEFAULT_LOCALE
    administrator_keyword: str = DEFAULT_ADMINISTRATOR_KEYWORD
    advance_cutoff_day: int = DEFAULT_ADVANCE_CUTOFF_DAY
    default_payment_method: PaymentMethod = PaymentMethod.CARD
    budget_tolerance: float = DEFAULT_BUDGET_TOLERANCE
    log_level: str = "INFO"
    log_json: bool = False


def load_settings(env: Optional[str] = None) -> EngineSettings:
    """Read settings once; the result is passed explicitly to every component."""
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module(env))
    # Settings modules read os.getenv at import time, reload so env changes apply.
    settings = importlib.reload(settings)

    return EngineSettings(
        locale=str(getattr(settings, "LOCALE", DEFAULT_LOCALE)),
        administrator_keyword=str(getattr(settings, "ADMINISTRATOR_KEYWORD", DEFAULT_ADMINISTRATOR_KEYWORD)),
        advance_cutoff_day=int(getattr(settings, "ADVANCE_CUTOFF_DAY", DEFAULT_ADVANCE_CUTOFF_DAY)),
        default_payment_method=PaymentMethod(getattr(settings, "DEFAULT_PAYMENT_METHOD", PaymentMethod.CARD.value)),
        budget_tolerance=float(getattr(settings, "BUDGET_TOLERANCE", DEFAULT_BUDGET_TOLERANCE)),
        log_level=str(getattr(settings, "LOG_LEVEL", "INFO")),
        log_json=bool(getattr(settings, "LOG_JSON", False)),
    )
