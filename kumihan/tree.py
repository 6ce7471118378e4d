import logging
from dataclasses import dataclass, field
from typing import Iterable

from kumihan.config import ParserConfig
from kumihan.errors import MarkupSyntaxError
from kumihan.lexer import Line
from kumihan.node import Comment, Doctype, Element, Node, NodeKind, Text
from kumihan.parser import Descriptor, LineParser

logger = logging.getLogger("kumihan.tree")


@dataclass
class TreeBuilder:
    """
    Rebuilds nesting from indentation with a stack of open elements.

    Indentation is permissive by default: a line indented any amount deeper
    than the open element becomes its child, and an indented first line
    becomes a root. With `strict_indentation` a jump of more than one level
    is a syntax error.
    """
    config: ParserConfig = field(default_factory=ParserConfig)
    roots: list[Node] = field(default_factory=list)
    unfinished: list[tuple[int, Element]] = field(default_factory=list)
    last_leaf: tuple[int, Node] | None = None

    def build(self, lines: Iterable[Line]) -> list[Node]:
        parser = LineParser(config=self.config)
        try:
            for line in lines:
                try:
                    descriptor = parser.parse(line.content)
                    self.add_line(line, descriptor)
                except MarkupSyntaxError as exc:
                    raise exc.locate(line.number, line.content)
        except MarkupSyntaxError:
            # Drop the partial tree so the builder can be reused
            self.finish()
            raise
        return self.finish()

    def add_line(self, line: Line, descriptor: Descriptor) -> None:
        while self.unfinished and self.unfinished[-1][0] >= line.depth:
            self.unfinished.pop()

        self.check_indentation(line)

        node = self.create_node(descriptor)
        if self.unfinished:
            _, parent = self.unfinished[-1]
            parent.children.append(node)
        else:
            self.roots.append(node)
        logger.debug("line %d: %r at depth %d", line.number, node, line.depth)

        if isinstance(node, Element) and not node.void:
            self.unfinished.append((line.depth, node))
            self.last_leaf = None
        else:
            self.last_leaf = (line.depth, node)

    def check_indentation(self, line: Line) -> None:
        if self.last_leaf is not None and line.depth > self.last_leaf[0]:
            _, leaf = self.last_leaf
            logger.warning(
                "line %d is indented under %r, which cannot have children; "
                "attaching it to the enclosing element",
                line.number, leaf,
            )

        if not self.config.strict_indentation:
            return
        expected = self.unfinished[-1][0] + 1 if self.unfinished else 0
        if line.depth > expected:
            raise MarkupSyntaxError(
                f"unexpected indentation (depth {line.depth}, expected at most {expected})"
            )

    def create_node(self, descriptor: Descriptor) -> Node:
        if descriptor.kind == NodeKind.DOCTYPE:
            return Doctype(value=descriptor.value)
        elif descriptor.kind == NodeKind.TEXT:
            return Text(text=descriptor.value)
        elif descriptor.kind == NodeKind.COMMENT:
            return Comment(text=descriptor.value)

        element = Element(
            tag=descriptor.tag,
            attributes=descriptor.attributes,
            text=descriptor.trailing_text,
            void=descriptor.tag in self.config.void_tags,
        )
        if descriptor.inline_child is not None:
            element.children.append(self.create_node(descriptor.inline_child))
        return element

    def finish(self) -> list[Node]:
        roots = self.roots
        self.roots = []
        self.unfinished = []
        self.last_leaf = None
        return roots
