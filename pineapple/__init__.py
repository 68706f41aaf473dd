from pineapple.lexer.lexer import Lexer
from pineapple.parser.parser import Parser
from pineapple.token import Token
from pineapple.tree.tree import SourceCodeNode
from pineapple.type import Type


def parse(program: str) -> SourceCodeNode:
    """Parse the Pineapple source code in `program`.

    Raises `LexerException` or `ParserException` on the first invalid token.
    """
    return Parser().parse(program)
