import os

import pytest

import pineapple
from pineapple import Parser
from pineapple.error.lexer_error import (
    ExpectedTargetError,
    LexerException,
    UnexpectedSymbolError,
)
from pineapple.error.parser_error import (
    ExpectedVariableNameError,
    ParserException,
    UnknownStatementError,
)
from pineapple.tree.tree import (
    AssignmentNode,
    PrintNode,
    SourceCodeNode,
    VariableNode,
)
from tests.test_util import open_file


def test_parser(valid_file: str):
    # Ensure that we can parse this program without Exceptions
    program: str = open_file(valid_file)

    parser = Parser()
    tree = parser.parse(program)
    assert tree.statements


def test_empty():
    parser = Parser()
    tree = parser.parse("")
    assert tree == SourceCodeNode(1, ())


def test_only_whitespace():
    parser = Parser()
    tree = parser.parse("  \n\t\n\r\n \f ")
    assert tree.statements == ()
    assert parser.lexer.line == 4


def test_empty_string_assignment():
    tree = pineapple.parse('$x=""')
    assert tree.statements == (AssignmentNode(1, VariableNode(1, "x"), ""),)


def test_assignment_and_print():
    tree = pineapple.parse('$msg="hi"\nprint($msg)')
    assert tree == SourceCodeNode(
        1,
        (
            AssignmentNode(1, VariableNode(1, "msg"), "hi"),
            PrintNode(2, VariableNode(2, "msg")),
        ),
    )


@pytest.mark.parametrize("newline", ["\n", "\r", "\r\n", "\n\r"])
def test_line_endings(newline: str):
    program = newline.join(['$a = "x"', "print($a)", "", "print($a)"])
    tree = pineapple.parse(program)
    assert [statement.line for statement in tree.statements] == [1, 2, 4]


def test_statement_order(hello_program: str):
    tree = pineapple.parse(hello_program)
    assert tree.statements == (
        AssignmentNode(1, VariableNode(1, "a"), "Hello, world!"),
        PrintNode(2, VariableNode(2, "a")),
    )


def test_multiple(multiple_program: str):
    tree = pineapple.parse(multiple_program)
    assert tree.statements == (
        AssignmentNode(1, VariableNode(1, "first_name"), "Ada"),
        AssignmentNode(2, VariableNode(2, "last_name"), "Lovelace"),
        PrintNode(4, VariableNode(4, "first_name")),
        PrintNode(5, VariableNode(5, "last_name")),
        AssignmentNode(7, VariableNode(7, "first_name"), "Grace"),
        PrintNode(8, VariableNode(8, "first_name")),
    )


def test_source_code_line():
    tree = pineapple.parse('\n\n  $a = ""')
    assert tree.line == 3
    assert tree.statements[0].line == 3


def test_whitespace_in_string():
    tree = pineapple.parse('$a = "  two  words "')
    assert tree.statements[0].value == "  two  words "


def test_multiline_string():
    tree = pineapple.parse('$a = "one\ntwo"\nprint($a)')
    assert tree.statements[0].value == "one\ntwo"
    assert tree.statements[1].line == 3


def test_statements_without_separator():
    tree = pineapple.parse('$a="x"print($a)$b=""')
    assert [type(statement) for statement in tree.statements] == [
        AssignmentNode,
        PrintNode,
        AssignmentNode,
    ]


def test_print_spacing():
    tree = pineapple.parse("print( \n $a \n )")
    assert tree.statements == (PrintNode(1, VariableNode(2, "a")),)


def test_print_requires_adjacent_bracket():
    with pytest.raises(ParserException) as excinfo:
        pineapple.parse("print ($a)")
    assert "Expected a '('" in str(excinfo.value)


def test_reuse_parser():
    parser = Parser()
    first = parser.parse('$a = "1"')
    second = parser.parse('$a = "1"')
    assert first == second


def test_unterminated_string():
    with pytest.raises(LexerException) as excinfo:
        pineapple.parse('$x="abc')
    (error,) = excinfo.value.errors
    assert isinstance(error, ExpectedTargetError)
    assert error.target == '"'
    assert "-> 1. " in str(excinfo.value)


def test_bare_variable_prefix():
    with pytest.raises(ParserException) as excinfo:
        pineapple.parse('$a = "x"\n\n$')
    (error,) = excinfo.value.errors
    assert isinstance(error, ExpectedVariableNameError)
    assert error.line == 3
    assert "variable name" in str(excinfo.value)
    assert "-> 3. " in str(excinfo.value)


def test_unexpected_symbol():
    with pytest.raises(LexerException) as excinfo:
        pineapple.parse('$a = "x"\nprint($a)!')
    (error,) = excinfo.value.errors
    assert isinstance(error, UnexpectedSymbolError)
    assert error.symbol == "!"
    assert error.line == 2


def test_unknown_statement():
    with pytest.raises(ParserException) as excinfo:
        pineapple.parse('= "x"')
    (error,) = excinfo.value.errors
    assert isinstance(error, UnknownStatementError)


def test_error_discards_statements():
    # One invalid statement discards all statements before it
    parser = Parser()
    with pytest.raises(ParserException):
        parser.parse('$a = "x"\nprint($a)\n$b = c')


def test_parser_error(parser_error: str):
    program: str = open_file(parser_error)

    parser = Parser()
    with pytest.raises(ParserException) as excinfo:
        parser.parse(program)

    # Every erroneous program is named after the error it contains, on line 2
    error_name = os.path.basename(parser_error).removesuffix(".pineapple")
    assert type(excinfo.value.errors[0]).__name__ == error_name
    assert "SyntaxError" in str(excinfo.value)
    assert "-> 2. " in str(excinfo.value)


def test_lexer_error(lexer_error: str):
    program: str = open_file(lexer_error)

    parser = Parser()
    with pytest.raises(LexerException) as excinfo:
        parser.parse(program)

    error_name = os.path.basename(lexer_error).removesuffix(".pineapple")
    assert type(excinfo.value.errors[0]).__name__ == error_name
    assert "LexerError" in str(excinfo.value)


def test_UnexpectedSymbolError():
    program: str = open_file("data/custom/lexerError/UnexpectedSymbolError.pineapple")

    parser = Parser()
    with pytest.raises(LexerException) as excinfo:
        parser.parse(program)
    assert (
        "LexerError" in str(excinfo.value)
        and "'#'" in str(excinfo.value)
        and "-> 3. " in str(excinfo.value)
    )


def test_UnexpectedTokenError():
    program: str = open_file("data/custom/parserError/UnexpectedTokenError.pineapple")

    parser = Parser()
    with pytest.raises(ParserException) as excinfo:
        parser.parse(program)
    assert (
        "Expected a ')'" in str(excinfo.value)
        and "'$'" in str(excinfo.value)
        and "-> 2. " in str(excinfo.value)
    )


def test_trailing_content(capsys):
    parser = Parser()
    # Stop after a single statement, leaving the rest of the program unparsed
    parser.parse_statements = lambda: [parser.parse_statement()]

    tree = parser.parse('$a = "x"\nprint($a)')
    assert tree.statements == (AssignmentNode(1, VariableNode(1, "a"), "x"),)

    captured = capsys.readouterr()
    assert "Warning" in captured.err and "'print'" in captured.err
