"""StateStore - Key-value API on top of the SQLite database."""

from __future__ import annotations

from collections.abc import Mapping

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from glboard.state_store.database import Database
from glboard.state_store.exceptions import EntryNotFoundError, StateStoreError
from glboard.state_store.models import Entry


class StateStore:
    """Named-value persistence with replace-on-write semantics.

    Each key holds one text value. ``put`` swaps the whole value inside a
    single transaction, so readers see either the old or the new value.
    ``put_many`` does the same for several keys at once. Database failures
    surface as StateStoreError.
    """

    def __init__(self, db_path: str = "glboard.db") -> None:
        """Initialize State Store with SQLite database.

        Creates database and tables if they don't exist.

        Args:
            db_path: Path to SQLite database file
        """
        self._db = Database(db_path)
        self._db.create_tables()

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if never written."""
        session = self._db.get_session()
        try:
            entry = session.get(Entry, key)
            return entry.value if entry is not None else None
        except SQLAlchemyError as e:
            raise StateStoreError(f"Failed to read '{key}': {e}") from e
        finally:
            session.close()

    def require(self, key: str) -> str:
        """Return the value stored under key.

        Raises:
            EntryNotFoundError: If nothing is stored under key
        """
        value = self.get(key)
        if value is None:
            raise EntryNotFoundError(f"No entry stored under '{key}'")
        return value

    def put(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        self.put_many({key: value})

    def put_many(self, values: Mapping[str, str]) -> None:
        """Store several values in one transaction.

        Either every key is replaced or, on failure, none is.

        Raises:
            StateStoreError: If the transaction fails
        """
        session = self._db.get_session()
        try:
            for key, value in values.items():
                entry = session.get(Entry, key)
                if entry is None:
                    session.add(Entry(key=key, value=value))
                else:
                    entry.value = value
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StateStoreError(f"Failed to write {sorted(values)}: {e}") from e
        finally:
            session.close()

    def delete(self, key: str) -> None:
        """Remove the entry under key.

        Raises:
            EntryNotFoundError: If nothing is stored under key
        """
        session = self._db.get_session()
        try:
            entry = session.get(Entry, key)
            if entry is None:
                raise EntryNotFoundError(f"No entry stored under '{key}'")
            session.delete(entry)
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StateStoreError(f"Failed to delete '{key}': {e}") from e
        finally:
            session.close()

    def keys(self) -> list[str]:
        """List stored keys in alphabetical order."""
        session = self._db.get_session()
        try:
            result = session.execute(select(Entry.key).order_by(Entry.key))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise StateStoreError(f"Failed to list keys: {e}") from e
        finally:
            session.close()
