"""
Option Model

Contains the Option model, the key-value row behind every blog setting.
"""

from datetime import datetime, timezone

from constants.enums import OptionSource
from .base import db


def _utcnow():
    return datetime.now(timezone.utc)


class Option(db.Model):
    """
    A single persisted setting.

    Values are always stored as text; typed access happens on read
    through services.coercion.
    """
    __tablename__ = 'option'

    id = db.Column(db.Integer, primary_key=True)
    option_key = db.Column(db.String(100), unique=True, nullable=False, index=True)
    option_value = db.Column(db.Text, nullable=False)
    # Origin of the option: 'SYSTEM', 'USER' or 'THEME'
    source = db.Column(db.Enum(OptionSource, native_enum=False, length=20),
                       nullable=False, default=OptionSource.SYSTEM)
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

    def __repr__(self):
        return f"<Option {self.option_key}={self.option_value!r}>"
