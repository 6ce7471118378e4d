import logging
from dataclasses import dataclass, field
from typing import Literal

from kumihan.config import ParserConfig
from kumihan.constants import (
    COMMENT_MARKER,
    DEFAULT_DOCTYPE,
    DEFAULT_TAG,
    DOCTYPE_KEYWORD,
    INLINE_CHILD_SEPARATOR,
    TEXT_MARKER,
)
from kumihan.errors import MarkupSyntaxError
from kumihan.node import NodeKind
from kumihan.state_machine import SegmentState, SegmentTokenizerStateMachine

logger = logging.getLogger("kumihan.parser")

QUOTE_CHARS = ['"', "'"]


def is_attribute_name_char(c: str) -> bool:
    return c.isalnum() or c in ['-', '_', ':', '.', '@']


@dataclass
class Descriptor:
    """The flat result of parsing a single line."""
    kind: NodeKind = NodeKind.ELEMENT
    tag: str = DEFAULT_TAG
    shorthand_classes: list[str] = field(default_factory=list)
    shorthand_ids: list[str] = field(default_factory=list)
    explicit_attributes: list[tuple[str, str]] = field(default_factory=list)
    inline_child: 'Descriptor | None' = None
    trailing_text: str = ""
    # Doctype value, or the body of a text or comment line
    value: str = ""

    @property
    def shorthand_id(self) -> str | None:
        return self.shorthand_ids[-1] if self.shorthand_ids else None

    @property
    def attributes(self) -> list[tuple[str, str]]:
        attrs: list[tuple[str, str]] = []
        if self.shorthand_classes:
            attrs.append(("class", " ".join(self.shorthand_classes)))
        for id_ in self.shorthand_ids:
            attrs.append(("id", id_))
        attrs.extend(self.explicit_attributes)
        return attrs


@dataclass
class AttributesExtractor:
    """
    Parses a parenthesized attribute list. `text` starts at the opening
    parenthesis and may continue past the closing one; `parse` returns the
    attributes and the index just after the closing parenthesis.
    """
    text: str = ""

    state: Literal['idle', 'name', 'equal_sign', 'value', 'after_value'] \
        = 'idle'

    def parse(self) -> tuple[list[tuple[str, str]], int]:
        attributes: list[tuple[str, str]] = []

        attribute_name = ""
        attribute_value = ""
        current_quote_char: str | None = None

        for i in range(1, len(self.text)):
            c = self.text[i]
            if self.state == 'idle':
                if c.isspace() or c == ',':
                    continue
                elif c == ')':
                    return attributes, i + 1
                elif is_attribute_name_char(c):
                    attribute_name = c
                    self.state = 'name'
                else:
                    raise MarkupSyntaxError(
                        f"unexpected character {c!r} in attribute list"
                    )
            elif self.state == 'name':
                if c == '=':
                    self.state = 'equal_sign'
                elif c.isspace() or c == ',':
                    attributes.append((attribute_name, ""))
                    attribute_name = ""
                    self.state = 'idle'
                elif c == ')':
                    attributes.append((attribute_name, ""))
                    return attributes, i + 1
                elif is_attribute_name_char(c):
                    attribute_name += c
                else:
                    raise MarkupSyntaxError(
                        f"unexpected character {c!r} in attribute name"
                    )
            elif self.state == 'equal_sign':
                if c in QUOTE_CHARS:
                    current_quote_char = c
                    self.state = 'value'
                else:
                    raise MarkupSyntaxError(
                        f"value of attribute {attribute_name!r} must be quoted"
                    )
            elif self.state == 'value':
                if c == current_quote_char:
                    attributes.append((attribute_name, attribute_value))
                    attribute_name = ""
                    attribute_value = ""
                    current_quote_char = None
                    self.state = 'after_value'
                else:
                    attribute_value += c
            elif self.state == 'after_value':
                if c.isspace() or c == ',':
                    self.state = 'idle'
                elif c == ')':
                    return attributes, i + 1
                else:
                    raise MarkupSyntaxError(
                        f"expected ',' or a space after attribute {attributes[-1][0]!r}"
                    )

        if self.state == 'value':
            raise MarkupSyntaxError(
                f"unterminated quoted value for attribute {attribute_name!r}"
            )
        if self.state == 'equal_sign':
            raise MarkupSyntaxError(
                f"missing value for attribute {attribute_name!r}"
            )
        raise MarkupSyntaxError("unterminated attribute list")


@dataclass
class LineParser:
    config: ParserConfig = field(default_factory=ParserConfig)

    def parse(self, content: str) -> Descriptor:
        descriptor = self.parse_expression(content, 0)
        logger.debug("parsed %r as %s", content, descriptor.kind.name)
        return descriptor

    def parse_expression(self, content: str, inline_depth: int) -> Descriptor:
        parts = content.split(maxsplit=1)
        keyword = parts[0]
        rest = parts[1] if len(parts) > 1 else ""
        if keyword == DOCTYPE_KEYWORD:
            return Descriptor(
                kind=NodeKind.DOCTYPE,
                value=rest.strip() or DEFAULT_DOCTYPE,
            )
        elif keyword == TEXT_MARKER:
            return Descriptor(kind=NodeKind.TEXT, value=rest)
        elif keyword == COMMENT_MARKER:
            return Descriptor(kind=NodeKind.COMMENT, value=rest.strip())

        descriptor, pos = self.parse_segments(content)

        if content.startswith("(", pos):
            extractor = AttributesExtractor(text=content[pos:])
            attributes, consumed = extractor.parse()
            descriptor.explicit_attributes = attributes
            pos += consumed

        if content.startswith(INLINE_CHILD_SEPARATOR.rstrip(), pos):
            self.parse_inline_child(descriptor, content, pos, inline_depth)
        elif pos < len(content):
            if not content[pos].isspace():
                raise MarkupSyntaxError(
                    f"unexpected character {content[pos]!r} after tag expression"
                )
            descriptor.trailing_text = content[pos:].lstrip()

        self.check_void(descriptor)
        return descriptor

    def parse_segments(self, content: str) -> tuple[Descriptor, int]:
        state_machine = SegmentTokenizerStateMachine()
        segments: list[tuple[str, str]] = []
        pos = len(content)
        for i, c in enumerate(content):
            output = state_machine.feed(c)
            if output:
                segments.append(output)
            if state_machine.state == SegmentState.DONE:
                pos = i
                break
        else:
            output = state_machine.finish()
            if output:
                segments.append(output)

        if not segments:
            raise MarkupSyntaxError("expected a tag name, class or id")

        descriptor = Descriptor()
        for kind, value in segments:
            if kind == "tag":
                descriptor.tag = value
            elif not value:
                raise MarkupSyntaxError(f"empty {kind} name")
            elif kind == "class":
                if value not in descriptor.shorthand_classes:
                    descriptor.shorthand_classes.append(value)
            elif kind == "id":
                descriptor.shorthand_ids.append(value)

        return descriptor, pos

    def parse_inline_child(
        self,
        descriptor: Descriptor,
        content: str,
        pos: int,
        inline_depth: int,
    ) -> None:
        if not content.startswith(INLINE_CHILD_SEPARATOR, pos):
            if pos + 1 == len(content):
                raise MarkupSyntaxError("missing inline child after ':'")
            raise MarkupSyntaxError("expected a space after ':'")
        if inline_depth >= self.config.max_inline_depth:
            raise MarkupSyntaxError(
                f"inline child chain deeper than {self.config.max_inline_depth}"
            )

        remainder = content[pos + len(INLINE_CHILD_SEPARATOR):].lstrip()
        if not remainder:
            raise MarkupSyntaxError("missing inline child after ':'")

        child = self.parse_expression(remainder, inline_depth + 1)
        if child.kind != NodeKind.ELEMENT:
            raise MarkupSyntaxError(
                "inline child must be an element expression"
            )
        descriptor.inline_child = child

    def check_void(self, descriptor: Descriptor) -> None:
        if descriptor.tag not in self.config.void_tags:
            return
        if descriptor.trailing_text or descriptor.inline_child:
            raise MarkupSyntaxError(
                f"void element <{descriptor.tag}> cannot have content"
            )
