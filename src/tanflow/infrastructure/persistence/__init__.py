"""Session state persistence adapters."""

from tanflow.infrastructure.persistence.file_session_store import FileSessionStore

__all__ = ["FileSessionStore"]
