from datetime import datetime
from typing import Callable

from ..config import settings
from .dates import now_in_zone

Clock = Callable[[], datetime]


def local_now() -> datetime:
    """Naive current time in the configured application timezone."""
    return now_in_zone(settings.APP_TIMEZONE)
