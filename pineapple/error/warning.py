from dataclasses import dataclass

from pineapple.error.communicator import Communicator, WarningRaiser
from pineapple.token import Token
from pineapple.util import Colors, Span


@dataclass
class Warning:
    program: str

    def __post_init__(self) -> None:
        WarningRaiser.WARNINGS.append(self)

    def create_message(
        self, span: Span, before: str, after: str = "", n_after=1
    ) -> str:
        return Communicator.create_message(
            self.program, span, "Warning", before, after, 1, n_after, Colors.YELLOW
        )


@dataclass
class TrailingContentWarning(Warning):
    token: Token

    def __str__(self) -> str:
        before = f"Ignored content after the end of the program, starting with {self.token.text!r} on {self.token.span.lines_str}."
        return self.create_message(self.token.span, before)
