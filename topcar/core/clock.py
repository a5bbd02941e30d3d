# topcar/core/clock.py
"""Business-local clock. Expense dates and sales days are both in TZ_NAME."""
from datetime import date, datetime
from zoneinfo import ZoneInfo

from topcar.core import config


def business_now() -> datetime:
    """Naive wall-clock time in the business timezone."""
    return datetime.now(ZoneInfo(config.TZ_NAME)).replace(tzinfo=None)


def business_today() -> date:
    return business_now().date()
