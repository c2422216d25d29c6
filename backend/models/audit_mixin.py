from sqlalchemy import Column, DateTime
from datetime import datetime
import pytz

from config import APP_TIMEZONE


def now_local():
    return datetime.now(pytz.timezone(APP_TIMEZONE))


class TimestampMixin:
    """Mixin that provides created/updated timestamps.

    Ledger records are never soft-deleted: invoices, payments and stock movements
    are immutable history, and master rows may be referenced by that history.
    """
    # DateTime(timezone=True) ensures the timezone info is persisted in the database.
    created_at = Column(DateTime(timezone=True), default=now_local)
    updated_at = Column(DateTime(timezone=True), onupdate=now_local)
