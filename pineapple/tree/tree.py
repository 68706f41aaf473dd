from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterator, Tuple, Union


@dataclass(frozen=True)
class Node:
    def __str__(self) -> str:
        from pineapple.tree.printer import Printer

        printer = Printer()
        return printer.print(self)

    def iter_fields(self, **kwargs) -> Iterator[Tuple[str, object]]:
        for _field in fields(self):
            yield _field.name, getattr(self, _field.name)


@dataclass(frozen=True)
class VariableNode(Node):
    line: int
    name: str


@dataclass(frozen=True)
class AssignmentNode(Node):
    line: int
    variable: VariableNode
    value: str


@dataclass(frozen=True)
class PrintNode(Node):
    line: int
    variable: VariableNode


Statement = Union[AssignmentNode, PrintNode]


@dataclass(frozen=True)
class SourceCodeNode(Node):
    line: int
    statements: Tuple[Statement, ...]
