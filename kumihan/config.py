from dataclasses import dataclass

from kumihan.constants import (
    DEFAULT_INDENT_WIDTH,
    DEFAULT_OUTPUT_INDENT,
    MAX_INLINE_DEPTH,
    SELF_CLOSING_TAGS,
)
from kumihan.errors import KumihanConfigError


@dataclass(frozen=True)
class ParserConfig:
    """
    Settings shared by the line classifier, the line parser and the tree
    builder. Passed in explicitly so that separate runs never share state.
    """
    indent_width: int = DEFAULT_INDENT_WIDTH
    void_tags: frozenset[str] = SELF_CLOSING_TAGS
    strict_indentation: bool = False
    max_inline_depth: int = MAX_INLINE_DEPTH

    def __post_init__(self) -> None:
        if self.indent_width < 1:
            raise KumihanConfigError(
                f"indent_width must be at least 1, got {self.indent_width}"
            )
        if self.max_inline_depth < 0:
            raise KumihanConfigError(
                f"max_inline_depth must not be negative, got {self.max_inline_depth}"
            )


@dataclass(frozen=True)
class RendererConfig:
    indent: str = DEFAULT_OUTPUT_INDENT
