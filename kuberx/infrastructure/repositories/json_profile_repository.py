"""Local key-value file repository for the session profile."""

import json
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

import structlog

from kuberx.core.config import settings
from kuberx.domain.entities import FinancialProfile
from kuberx.domain.exceptions import InvalidProfileException, ProfileStorageException
from kuberx.domain.interfaces import ProfileRepository

logger = structlog.get_logger(__name__)


class JsonFileProfileRepository(ProfileRepository):
    """
    Profile repository backed by a JSON object on disk.

    The file acts as a small key-value store shared by the application;
    the profile snapshot lives under a single application-scoped key,
    and other keys in the file are preserved on write.
    """

    def __init__(
        self,
        path: Union[str, Path, None] = None,
        storage_key: Optional[str] = None,
    ):
        self._path = Path(path or settings.profile_store_path)
        self._key = storage_key or settings.profile_storage_key

    @property
    def path(self) -> Path:
        return self._path

    @property
    def storage_key(self) -> str:
        return self._key

    def load_profile(self) -> Optional[FinancialProfile]:
        store = self._read_store()
        snapshot = store.get(self._key)

        if snapshot is None:
            return None

        try:
            return FinancialProfile.from_dict(snapshot)
        except InvalidProfileException as e:
            logger.error(
                "profile_snapshot_corrupt",
                path=str(self._path),
                key=self._key,
                error=e.message,
            )
            raise ProfileStorageException(f"Stored profile is invalid: {e.message}") from e

    def save_profile(self, profile: FinancialProfile) -> None:
        store = self._read_store()
        store[self._key] = profile.to_dict()
        self._write_store(store)

        logger.debug("profile_snapshot_written", path=str(self._path), key=self._key)

    def clear(self) -> None:
        store = self._read_store()
        if self._key not in store:
            return

        del store[self._key]
        self._write_store(store)

        logger.debug("profile_snapshot_cleared", path=str(self._path), key=self._key)

    def _read_store(self) -> dict:
        if not self._path.exists():
            return {}

        try:
            with open(self._path, encoding="utf-8") as f:
                store = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ProfileStorageException(f"Cannot read profile store {self._path}: {e}") from e

        if not isinstance(store, dict):
            raise ProfileStorageException(f"Profile store {self._path} is not a JSON object")

        return store

    def _write_store(self, store: dict) -> None:
        """Write atomically via a temp file in the same directory."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
            )
        except OSError as e:
            raise ProfileStorageException(f"Cannot write profile store {self._path}: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(store, f, ensure_ascii=False, indent=2, allow_nan=False)
            os.replace(tmp_path, self._path)
        except (OSError, TypeError, ValueError) as e:
            try:
                os.unlink(tmp_path)
            except FileNotFoundError:
                pass
            raise ProfileStorageException(f"Cannot write profile store {self._path}: {e}") from e
