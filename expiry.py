from datetime import date
from typing import Optional

from schemas import ExpiryInfo

EXPIRY_WARNING_DAYS = 30


def expiry_status(expiry_date: Optional[date], today: Optional[date] = None) -> Optional[ExpiryInfo]:
    """
    Expiry state of a certificate relative to `today`.

    None when there is no expiry date or it is more than EXPIRY_WARNING_DAYS
    away. Always recomputed: the answer moves with the calendar.
    """
    if expiry_date is None:
        return None
    today = today or date.today()
    days_left = (expiry_date - today).days
    if days_left < 0:
        return ExpiryInfo(status="expired")
    if days_left <= EXPIRY_WARNING_DAYS:
        return ExpiryInfo(status="expiring", days_until_expiry=days_left)
    return None
