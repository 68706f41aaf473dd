from enum import Enum


class Type(Enum):
    EOF = "EOF"
    VAR_PREFIX = "$"
    LRB = "("
    RRB = ")"
    EQ = "="
    QUOTE = '"'
    DUOQUOTE = '""'
    NAME = "NAME"
    PRINT = "print"
    IGNORED = "IGNORED"

    def to_type(type_str: str):
        return Type[type_str]

    def __str__(self) -> str:
        match self:
            case Type.EOF:
                return "end of input"
            case Type.NAME:
                return "name"
            case Type.IGNORED:
                return "whitespace"
        return repr(self.value)

    def article_str(self) -> str:
        match self:
            case Type.EOF:
                return f"the {self}"
            case Type.IGNORED:
                return str(self)
            case _:
                return f"a {self}"
