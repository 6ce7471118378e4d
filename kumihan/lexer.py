import logging
import re
from dataclasses import dataclass, field
from typing import Iterator, NamedTuple

from kumihan.config import ParserConfig

logger = logging.getLogger("kumihan.lexer")

LINE_BREAK = re.compile(r"\r\n|\r|\n")
INDENT_CHARS = " \t"


class Line(NamedTuple):
    number: int
    depth: int
    content: str


@dataclass
class LineClassifier:
    """
    Splits source text into non-blank lines and measures how deeply each one
    is indented. Whether a depth makes structural sense is left to the tree
    builder.

    Only `\\r\\n`, `\\r` and `\\n` end a line, and only tabs and spaces count
    as indentation. Any other leading whitespace stays part of the content.
    """
    config: ParserConfig = field(default_factory=ParserConfig)

    def measure_depth(self, leading: str) -> int:
        tabs = leading.count("\t")
        spaces = leading.count(" ")
        return tabs + spaces // self.config.indent_width

    def classify(self, text: str) -> Iterator[Line]:
        for number, raw in enumerate(LINE_BREAK.split(text), start=1):
            if not raw.strip():
                continue
            content = raw.strip(INDENT_CHARS)
            leading = raw[:len(raw) - len(raw.lstrip(INDENT_CHARS))]
            depth = self.measure_depth(leading)
            logger.debug("line %d: depth=%d content=%r", number, depth, content)
            yield Line(number=number, depth=depth, content=content)
