from enum import Enum, auto
from typing import Iterator

from pineapple.token import Token
from pineapple.tree.tree import AssignmentNode, Node, PrintNode, VariableNode
from pineapple.tree.visitor import YieldVisitor
from pineapple.type import Type


class PrintingInfo(Enum):
    SPACE = auto()
    NEWLINE = auto()


class Printer(YieldVisitor):
    """Render an AST as a Pineapple program, one statement per line."""

    def print(self, tree: Node) -> str:
        program = ""
        for token in self.visit(tree):
            if token == PrintingInfo.NEWLINE:
                program += "\n"
            elif token == PrintingInfo.SPACE:
                program += " "
            else:
                program += token.text

        return program.strip()

    def visit_VariableNode(self, node: VariableNode, **kwargs) -> Iterator[Token]:
        yield Token("$", Type.VAR_PREFIX)
        yield Token(node.name, Type.NAME)

    def visit_AssignmentNode(self, node: AssignmentNode, **kwargs) -> Iterator[Token]:
        yield from self.visit(node.variable)
        yield PrintingInfo.SPACE
        yield Token("=", Type.EQ)
        yield PrintingInfo.SPACE
        if node.value:
            yield Token(f'"{node.value}"', Type.QUOTE)
        else:
            yield Token('""', Type.DUOQUOTE)
        yield PrintingInfo.NEWLINE

    def visit_PrintNode(self, node: PrintNode, **kwargs) -> Iterator[Token]:
        yield Token("print", Type.PRINT)
        yield Token("(", Type.LRB)
        yield from self.visit(node.variable)
        yield Token(")", Type.RRB)
        yield PrintingInfo.NEWLINE
