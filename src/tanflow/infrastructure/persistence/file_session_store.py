"""File-based session state storage."""

from __future__ import annotations

import base64
import binascii
import logging
import os
from pathlib import Path
from typing import Optional

from cryptography.fernet import Fernet, InvalidToken

from tanflow.domain.banking.exceptions import SessionStateError
from tanflow.domain.banking.ports import SessionStorePort

logger = logging.getLogger(__name__)


class FileSessionStore(SessionStorePort):
    """
    Keeps the session blob base64 encoded in a single file.

    The blob contains the bank's system id and, with private data included,
    the PIN-derived session secrets. When an encryption key is given the
    blob is stored as a Fernet token instead. The file is created with
    mode 0600 and replaced atomically.
    """

    def __init__(self, path: Path | str, encryption_key: Optional[bytes] = None):
        self._path = Path(path).expanduser()
        self._fernet = Fernet(encryption_key) if encryption_key else None

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[bytes]:
        if not self._path.exists():
            return None

        content = self._path.read_bytes().strip()
        if not content:
            return None

        try:
            if self._fernet is not None:
                return self._fernet.decrypt(content)
            return base64.b64decode(content, validate=True)
        except InvalidToken as e:
            msg = f"Session state in {self._path} cannot be decrypted"
            raise SessionStateError(msg) from e
        except binascii.Error as e:
            msg = f"Session state in {self._path} is not valid base64"
            raise SessionStateError(msg) from e

    def save(self, blob: bytes) -> None:
        if self._fernet is not None:
            content = self._fernet.encrypt(blob)
        else:
            content = base64.b64encode(blob)

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "wb") as f:
            f.write(content)
        os.replace(tmp_path, self._path)
        logger.debug("Wrote session state to %s", self._path)

    def clear(self) -> None:
        try:
            self._path.unlink()
        except FileNotFoundError:
            return
        logger.info("Removed session state %s", self._path)
