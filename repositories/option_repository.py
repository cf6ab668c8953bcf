"""
Option Repository

Find/save/delete access to the option table by key. Queries only; callers
decide what to store.
"""

from sqlalchemy.exc import SQLAlchemyError

from models import db, Option


class OptionRepository:
    """Flask-SQLAlchemy backed option repository."""

    def __init__(self, session=None):
        self.session = session or db.session

    def list_all(self):
        """Return every stored option."""
        return list(self.session.execute(db.select(Option)).scalars())

    def find_by_key(self, key):
        """Return the option stored under `key`, or None."""
        return self.session.execute(
            db.select(Option).where(Option.option_key == key)
        ).scalar_one_or_none()

    def save(self, option):
        """Insert or update an option and commit."""
        self.session.add(option)
        self._commit()
        return option

    def delete_by_key(self, key):
        """Delete the option stored under `key`. Returns the number of rows removed."""
        try:
            result = self.session.execute(
                db.delete(Option).where(Option.option_key == key)
            )
        except SQLAlchemyError:
            self.session.rollback()
            raise
        self._commit()
        return result.rowcount

    def _commit(self):
        # Leave the session usable for the next call; the error still reaches the caller
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
