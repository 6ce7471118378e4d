from dataclasses import dataclass, field
from enum import Enum


class NodeKind(Enum):
    ELEMENT = 1
    TEXT = 2
    DOCTYPE = 3
    COMMENT = 4


@dataclass
class Node:
    children: list['Node'] = field(default_factory=list)

    @property
    def kind(self) -> NodeKind:
        raise NotImplementedError


@dataclass
class Element(Node):
    tag: str = ""
    attributes: list[tuple[str, str]] = field(default_factory=list)
    text: str = ""
    void: bool = False

    def __repr__(self) -> str:
        if self.attributes:
            return f"<{self.tag} {self.attribute_str}>"
        return f"<{self.tag}>"

    @property
    def kind(self) -> NodeKind:
        return NodeKind.ELEMENT

    @property
    def self_closing(self) -> bool:
        return self.void or (not self.children and not self.text)

    @property
    def attribute_str(self) -> str:
        attrs: list[str] = []
        for key, value in self.attributes:
            attrs.append(f'{key}="{value}"')
        return " ".join(attrs)


@dataclass
class Text(Node):
    text: str = ""

    def __repr__(self) -> str:
        return repr(self.text)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.TEXT


@dataclass
class Doctype(Node):
    value: str = ""

    def __repr__(self) -> str:
        return f"<!DOCTYPE {self.value}>"

    @property
    def kind(self) -> NodeKind:
        return NodeKind.DOCTYPE


@dataclass
class Comment(Node):
    text: str = ""

    def __repr__(self) -> str:
        return f"<!-- {self.text} -->"

    @property
    def kind(self) -> NodeKind:
        return NodeKind.COMMENT


def print_tree(node: Node, indent: int = 0) -> None:
    print(" " * indent, node)
    for child in node.children:
        print_tree(child, indent + 2)
