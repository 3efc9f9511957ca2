"""Console implementation of the user interaction port."""

from rich.console import Console

from tanflow.domain.banking.ports import UserIOPort


class ConsoleUserIO(UserIOPort):
    """Blocking terminal I/O on a rich Console.

    Bank texts are printed without markup so brackets in challenge
    instructions come through verbatim.
    """

    def __init__(self, console: Console | None = None):
        self._console = console or Console()

    def present(self, text: str) -> None:
        self._console.print(text, markup=False, highlight=False, soft_wrap=True)

    def read_line(self) -> str:
        return self._console.input("> ")
