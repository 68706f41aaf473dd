from dataclasses import dataclass

from pineapple.error.error import CompilerError, PineappleException
from pineapple.token import Token
from pineapple.type import Type


class ParserException(PineappleException):
    pass


class ParserError(CompilerError):
    def create_error(self, before: str, after=""):
        return super().create_error(before, class_name="SyntaxError", after=after)

    @staticmethod
    def describe(token: Token) -> str:
        match token.type:
            case Type.EOF | Type.IGNORED:
                return token.type.article_str()
            case Type.NAME:
                return f"the name {token.text!r}"
        return repr(token.text)


@dataclass
class UnexpectedTokenError(ParserError):
    expected: Type
    got: Token

    def __str__(self) -> str:
        return self.create_error(
            f"Expected {self.expected.article_str()}, but got {self.describe(self.got)} on {self.span.lines_str}."
        )


@dataclass
class NotAStringError(ParserError):
    got: Token

    def __str__(self) -> str:
        return self.create_error(
            f"Expected a string, but got {self.describe(self.got)} on {self.span.lines_str}.",
            'Strings are written as "text" or "".',
        )


@dataclass
class ExpectedVariablePrefixError(ParserError):
    got: Token

    def __str__(self) -> str:
        return self.create_error(
            f"Expected a '$' to start a variable on {self.span.lines_str}, "
            f"but got {self.describe(self.got)}."
        )


@dataclass
class ExpectedVariableNameError(ParserError):
    got: Token

    def __str__(self) -> str:
        return self.create_error(
            f"Expected a variable name after '$' on {self.span.lines_str}, "
            f"but got {self.describe(self.got)}."
        )


@dataclass
class UnknownStatementError(ParserError):
    got: Token

    def __str__(self) -> str:
        return self.create_error(
            f"Unknown statement starting with {self.describe(self.got)} on {self.span.lines_str}.",
            "Expected an assignment such as '$a = \"text\"' or a call such as 'print($a)'.",
        )
