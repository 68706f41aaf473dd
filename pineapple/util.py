from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

# Windows (\r\n) and the reversed (\n\r) line endings each count as one newline
NEWLINE_PATTERN = re.compile(r"\r\n|\n\r|\n|\r")

BLANK_CHARACTERS = " \t\f\n\r"


@dataclass
class Span:
    ln: Tuple[int, int]
    col: Tuple[int, int]

    @property
    def start_ln(self) -> int:
        return self.ln[0]

    @property
    def end_ln(self) -> int:
        return self.ln[1]

    @property
    def start_col(self) -> int:
        return self.col[0]

    @property
    def end_col(self) -> int:
        return self.col[1]

    @property
    def multiline(self) -> bool:
        return self.start_ln != self.end_ln

    @property
    def lines_str(self) -> str:
        if self.multiline:
            return f"lines [{self.start_ln}-{self.end_ln}]"
        return f"line [{self.start_ln}]"

    @classmethod
    def default(cls):
        return cls(-1, (0, -1))

    def __init__(self, line_no: int | Tuple[int, int], span: Tuple[int, int]) -> None:
        if isinstance(line_no, int):
            self.ln = (line_no, line_no)
        else:
            self.ln = line_no
        self.col = span


def split_lines(program: str) -> List[str]:
    """Split `program` into lines, using the same newline rules as the Lexer.

    Unlike `str.splitlines`, "\\n\\r" is a single line break and a trailing
    newline produces a final empty line, so line numbers reported by the
    Lexer always index into the result.
    """
    return NEWLINE_PATTERN.split(program)


class Colors:
    RED = "\033[31m"
    ENDC = "\033[m"
    YELLOW = "\033[33m"
