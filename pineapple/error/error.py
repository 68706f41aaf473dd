from dataclasses import dataclass, field
from typing import List, Optional

from pineapple.error.communicator import Communicator, ErrorRaiser
from pineapple.util import Span, split_lines


# Python exceptions to differentiate the stage in which errors are thrown
class PineappleException(Exception):
    def __init__(self, message: str, errors: Optional[List] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


@dataclass
class CompilerError:
    program: str
    span: Span
    n_before: int = field(init=False, default=1)
    n_after: int = field(init=False, default=1)

    # Call __post_init__ using dataclass, to automatically add errors to the list
    def __post_init__(self) -> None:
        ErrorRaiser.ERRORS.append(self)

    def create_error(
        self, before: str = "", after: str = "", class_name="CompilerError"
    ):
        return Communicator.create_message(
            self.program,
            self.span,
            class_name,
            before,
            after,
            self.n_before,
            self.n_after,
        )

    @property
    def line(self) -> int:
        return self.span.start_ln

    # Give the characters that caused the error to be thrown
    @property
    def error_chars(self) -> str:
        error_line = split_lines(self.program)[self.span.start_ln - 1]
        return error_line[self.span.start_col : self.span.end_col]
