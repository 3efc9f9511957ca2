"""Session store port interface."""

from abc import ABC, abstractmethod
from typing import Optional


class SessionStorePort(ABC):
    """
    Durable storage for the opaque session state blob.

    Keeping the blob lets a later process continue the session without a
    fresh login (and often without another TAN).
    """

    @abstractmethod
    def load(self) -> Optional[bytes]:
        """
        Return the stored blob, or None if nothing was stored yet.

        Raises
        ------
        SessionStateError
            If stored content exists but cannot be read back
        """

    @abstractmethod
    def save(self, blob: bytes) -> None:
        """Replace the stored blob."""

    @abstractmethod
    def clear(self) -> None:
        """Remove the stored blob, if any."""
