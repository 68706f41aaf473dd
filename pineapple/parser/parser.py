import logging
from typing import List

from pineapple.error.communicator import Communicator
from pineapple.error.warning import TrailingContentWarning
from pineapple.lexer.lexer import Lexer
from pineapple.type import Type

from pineapple.tree.tree import (  # isort:skip
    AssignmentNode,
    PrintNode,
    SourceCodeNode,
    Statement,
    VariableNode,
)
from pineapple.error.parser_error import (  # isort:skip
    ExpectedVariableNameError,
    ExpectedVariablePrefixError,
    NotAStringError,
    ParserException,
    UnknownStatementError,
)

logger = logging.getLogger(__name__)


class Parser:
    def __init__(self) -> None:
        self.program = ""
        self.lexer = Lexer(self.program)

    def parse(self, program: str) -> SourceCodeNode:
        """Parse a Pineapple program into an Abstract Syntax Tree.

        Args:
            program (str): The full source code of the program.

        Raises:
            LexerException: If the program contains a character that cannot be
                tokenized, or a string literal that is never closed.
            ParserException: If the tokens do not form valid statements.

        Returns:
            SourceCodeNode: The root of the AST.
        """
        self.program = program
        self.lexer = Lexer(program)

        tree = self.parse_source_code()

        # Content after the last statement is reported, but does not invalidate the tree
        token = self.lexer.get_next_token()
        if token.type != Type.EOF:
            TrailingContentWarning(self.program, token)

        Communicator.communicate(ParserException)
        return tree

    def parse_source_code(self) -> SourceCodeNode:
        self.lexer.look_ahead_and_skip(Type.IGNORED)
        line = self.lexer.line
        statements = self.parse_statements()
        return SourceCodeNode(line, tuple(statements))

    def parse_statements(self) -> List[Statement]:
        statements = []

        self.lexer.look_ahead_and_skip(Type.IGNORED)
        while self.lexer.look_ahead() != Type.EOF:
            statements.append(self.parse_statement())
            self.lexer.look_ahead_and_skip(Type.IGNORED)

        return statements

    def parse_statement(self) -> Statement:
        match self.lexer.look_ahead():
            case Type.PRINT:
                statement = self.parse_print()
            case Type.VAR_PREFIX:
                statement = self.parse_assignment()
            case _:
                token = self.lexer.peek()
                UnknownStatementError(self.program, token.span, token)
                Communicator.communicate(ParserException)

        logger.debug("Parsed %r", statement)
        return statement

    def parse_print(self) -> PrintNode:
        line = self.lexer.line
        self.lexer.find_and_consume(Type.PRINT)
        self.lexer.find_and_consume(Type.LRB)
        self.lexer.look_ahead_and_skip(Type.IGNORED)
        variable = self.parse_variable()
        self.lexer.look_ahead_and_skip(Type.IGNORED)
        self.lexer.find_and_consume(Type.RRB)
        self.lexer.look_ahead_and_skip(Type.IGNORED)
        return PrintNode(line, variable)

    def parse_assignment(self) -> AssignmentNode:
        line = self.lexer.line
        variable = self.parse_variable()
        self.lexer.look_ahead_and_skip(Type.IGNORED)
        self.lexer.find_and_consume(Type.EQ)
        self.lexer.look_ahead_and_skip(Type.IGNORED)
        value = self.parse_string()
        self.lexer.look_ahead_and_skip(Type.IGNORED)
        return AssignmentNode(line, variable, value)

    def parse_variable(self) -> VariableNode:
        line = self.lexer.line

        token = self.lexer.get_next_token()
        if token.type != Type.VAR_PREFIX:
            ExpectedVariablePrefixError(self.program, token.span, token)
            Communicator.communicate(ParserException)

        token = self.lexer.peek()
        if token.type != Type.NAME:
            ExpectedVariableNameError(self.program, token.span, token)
            Communicator.communicate(ParserException)

        name = self.parse_name()
        self.lexer.look_ahead_and_skip(Type.IGNORED)
        return VariableNode(line, name)

    def parse_name(self) -> str:
        _, name = self.lexer.find_and_consume(Type.NAME)
        return name

    def parse_string(self) -> str:
        match self.lexer.look_ahead():
            case Type.DUOQUOTE:
                self.lexer.find_and_consume(Type.DUOQUOTE)
                self.lexer.look_ahead_and_skip(Type.IGNORED)
                return ""

            case Type.QUOTE:
                self.lexer.find_and_consume(Type.QUOTE)
                string = self.lexer.scan_until_token(Type.QUOTE.value)
                self.lexer.find_and_consume(Type.QUOTE)
                self.lexer.look_ahead_and_skip(Type.IGNORED)
                return string

        token = self.lexer.peek()
        NotAStringError(self.program, token.span, token)
        Communicator.communicate(ParserException)
