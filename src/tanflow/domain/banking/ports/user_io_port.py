"""User interaction port interface."""

from abc import ABC, abstractmethod


class UserIOPort(ABC):
    """
    How the authentication flow talks to a human.

    A console implementation blocks on stdin. A web application can suspend
    the flow in read_line() until the user answers in another request.
    """

    @abstractmethod
    def present(self, text: str) -> None:
        """Show a message to the user. Must not block."""

    @abstractmethod
    def read_line(self) -> str:
        """Block until the user entered one line of text and return it."""
