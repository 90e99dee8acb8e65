"""File-backed persistence of an accomplishment session."""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from rxprobe.accomplishments.session import AccomplishmentSession
from rxprobe.core.rules.tags import CONCURRENT_SESSION, STORAGE_TAMPERING
from rxprobe.core.types import FieldName
from rxprobe.storage.checksum import create_checksum_package, extract_verified_data
from rxprobe.utils.helpers import write_file_safely

ACCOMPLISHMENTS_KEY = "detector_accomplishments"
PREVIOUS_ACCOMPLISHMENTS_KEY = "detector_previous_accomplishments"
FORM_ACCOMPLISHMENTS_KEY = "detector_form_accomplishments"
PENDING_FLAGS_KEY = "detector_pending_flags"

STORAGE_KEYS = (
    ACCOMPLISHMENTS_KEY,
    PREVIOUS_ACCOMPLISHMENTS_KEY,
    FORM_ACCOMPLISHMENTS_KEY,
    PENDING_FLAGS_KEY,
)


def _field_sets_to_data(field_sets: dict[FieldName, frozenset[str]]) -> dict[str, list[str]]:
    return {field.value: sorted(field_sets[field]) for field in FieldName if field_sets.get(field)}


def _data_to_field_sets(data: Any) -> dict[FieldName, frozenset[str]]:
    if not isinstance(data, dict):
        raise ValueError("expected a mapping of field names to tag lists")
    return {FieldName(name): frozenset(tags) for name, tags in data.items() if tags}


def _pending_flags(session: AccomplishmentSession) -> list[str]:
    flags = []
    if session.concurrent_session:
        flags.append(CONCURRENT_SESSION)
    if session.storage_tampered:
        flags.append(STORAGE_TAMPERING)
    return flags


def session_to_storage(session: AccomplishmentSession) -> dict[str, dict[str, Any]]:
    """Checksum-packaged storage form of a session.

    Flags not yet consumed by a submission are stored as pending, so a flag
    raised while saving still reaches the next run's first submission.
    """
    return {
        ACCOMPLISHMENTS_KEY: create_checksum_package(_field_sets_to_data(session.accomplishments)),
        PREVIOUS_ACCOMPLISHMENTS_KEY: create_checksum_package(
            _field_sets_to_data(session.previous_accomplishments)
        ),
        FORM_ACCOMPLISHMENTS_KEY: create_checksum_package(sorted(session.form_accomplishments)),
        PENDING_FLAGS_KEY: create_checksum_package(_pending_flags(session)),
    }


class SessionStore:
    """Persists a session to a JSON file with per-key checksums.

    The store keeps an in-memory backup of the last state it loaded or saved.
    When the file fails verification the backup is restored and the session
    is flagged as tampered. When the file changed on disk since the store
    last touched it, the session is flagged as concurrent. Flags still
    pending when the session is saved are written with it.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._backup: dict[str, dict[str, Any]] | None = None
        self._last_seen: str | None = None

    def _read_text(self) -> str | None:
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")

    def _changed_externally(self, text: str | None) -> bool:
        return self._last_seen is not None and text != self._last_seen

    def _restore_backup(self) -> AccomplishmentSession:
        if self._backup is None:
            return AccomplishmentSession()
        return self._decode(self._backup) or AccomplishmentSession()

    @staticmethod
    def _decode(storage: Any) -> AccomplishmentSession | None:
        """Rebuild a session from storage, or None if any key fails verification."""
        if not isinstance(storage, dict):
            return None

        verified = {}
        for key in STORAGE_KEYS:
            if key not in storage:
                verified[key] = None
                continue
            data = extract_verified_data(storage[key])
            if data is None:
                return None
            verified[key] = data

        try:
            pending = frozenset(verified[PENDING_FLAGS_KEY] or ())
            return AccomplishmentSession(
                accomplishments=_data_to_field_sets(verified[ACCOMPLISHMENTS_KEY] or {}),
                previous_accomplishments=_data_to_field_sets(
                    verified[PREVIOUS_ACCOMPLISHMENTS_KEY] or {}
                ),
                form_accomplishments=frozenset(verified[FORM_ACCOMPLISHMENTS_KEY] or ()),
                storage_tampered=STORAGE_TAMPERING in pending,
                concurrent_session=CONCURRENT_SESSION in pending,
            )
        except (TypeError, ValueError):
            return None

    def load(self) -> AccomplishmentSession:
        """Read the session from disk.

        Returns:
            The stored session with any pending flags; a fresh one when no
            file exists; the last known good state flagged as tampered when
            verification fails
        """
        text = self._read_text()
        concurrent = self._changed_externally(text)
        tampered = False

        if text is None:
            if self._backup is not None:
                logger.warning(f"Session file {self.path} was deleted, restoring backup")
                session = self._restore_backup()
                tampered = True
            else:
                session = AccomplishmentSession()
        else:
            try:
                storage = json.loads(text)
            except json.JSONDecodeError:
                storage = None
            session = self._decode(storage)

            if session is None:
                logger.warning(f"Session file {self.path} failed verification, restoring backup")
                session = self._restore_backup()
                tampered = True
            else:
                self._backup = storage

        if tampered:
            session.flag_storage_tampering()
        # A tampered file also differs from the last seen text
        elif concurrent:
            logger.warning(f"Session file {self.path} was changed by another session")
            session.flag_concurrent_session()

        self._last_seen = text
        logger.debug(f"Loaded session from {self.path}: {session.badge_count} badges")
        return session

    def save(self, session: AccomplishmentSession) -> None:
        """Write the session to disk.

        If another writer changed the file since the last load or save, the
        session is flagged as concurrent before it overwrites the file.

        Args:
            session: Session to persist
        """
        if self._changed_externally(self._read_text()):
            logger.warning(f"Session file {self.path} was changed by another session")
            session.flag_concurrent_session()

        storage = session_to_storage(session)
        text = json.dumps(storage, indent=2, ensure_ascii=False)

        write_file_safely(self.path, lambda f: f.write(text), "writing session")

        self._backup = storage
        self._last_seen = text
        logger.debug(f"Saved session to {self.path}")

    def clear(self) -> None:
        """Delete the session file and forget the backup."""
        if self.path.exists():
            self.path.unlink()
        self._backup = None
        self._last_seen = None
