from dataclasses import dataclass

from pineapple.error.error import CompilerError, PineappleException


class LexerException(PineappleException):
    pass


class LexerError(CompilerError):
    def create_error(self, before: str, after=""):
        return super().create_error(before, class_name="LexerError", after=after)


@dataclass
class UnexpectedSymbolError(LexerError):
    symbol: str

    def __str__(self) -> str:
        return self.create_error(
            f"Unexpected symbol {self.symbol!r} on {self.span.lines_str}."
        )


@dataclass
class ExpectedTargetError(LexerError):
    target: str

    def __str__(self) -> str:
        return self.create_error(
            f"Expected {self.target!r} after {self.span.lines_str}, but reached the end of input.",
            "Perhaps a string literal was never closed?" if self.target == '"' else "",
        )
