import logging
from dataclasses import dataclass, field
from typing import NamedTuple

from kumihan.config import RendererConfig
from kumihan.node import Comment, Doctype, Element, Node, Text

logger = logging.getLogger("kumihan.renderer")


class ClosingTag(NamedTuple):
    tag: str


@dataclass
class Renderer:
    """
    Serializes a node forest into indented HTML, one construct per line.

    Attribute values and text are written verbatim; nothing is escaped.
    Walks the tree with an explicit stack, so nesting depth is only bounded
    by memory.
    """
    config: RendererConfig = field(default_factory=RendererConfig)

    def render(self, nodes: list[Node]) -> str:
        lines: list[str] = []
        pending: list[tuple[Node | ClosingTag, int]] = [
            (node, 0) for node in reversed(nodes)
        ]
        while pending:
            item, depth = pending.pop()
            pad = self.config.indent * depth
            if isinstance(item, ClosingTag):
                lines.append(f"{pad}</{item.tag}>")
            elif isinstance(item, Element):
                self.render_element(item, depth, lines, pending)
            else:
                lines.append(self.render_leaf(item, pad))

        logger.debug("rendered %d root nodes into %d lines", len(nodes), len(lines))
        if not lines:
            return ""
        return "\n".join(lines) + "\n"

    def render_leaf(self, node: Node, pad: str) -> str:
        if isinstance(node, Doctype):
            return f"{pad}<!DOCTYPE {node.value}>"
        elif isinstance(node, Comment):
            return f"{pad}<!-- {node.text} -->"
        elif isinstance(node, Text):
            return f"{pad}{node.text}"
        else:
            raise ValueError(f"Unsupported node: {node!r}")

    def render_element(
        self,
        element: Element,
        depth: int,
        lines: list[str],
        pending: list[tuple[Node | ClosingTag, int]],
    ) -> None:
        pad = self.config.indent * depth
        open_tag = f"<{element.tag}>"
        if element.attributes:
            open_tag = f"<{element.tag} {element.attribute_str}>"

        if element.void:
            lines.append(f"{pad}{open_tag}")
            return
        if element.self_closing:
            # Closed on the same line so that HTML parsers keep siblings apart
            lines.append(f"{pad}{open_tag}</{element.tag}>")
            return

        lines.append(f"{pad}{open_tag}")
        if element.text:
            lines.append(f"{pad}{self.config.indent}{element.text}")
        pending.append((ClosingTag(element.tag), depth))
        for child in reversed(element.children):
            pending.append((child, depth + 1))
