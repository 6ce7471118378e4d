SELF_CLOSING_TAGS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})

# Spaces per nesting level in the source markup. A tab is always one level.
DEFAULT_INDENT_WIDTH = 2

# Indentation unit written by the renderer.
DEFAULT_OUTPUT_INDENT = "  "

# Longest `a: b: c` chain accepted on a single line.
MAX_INLINE_DEPTH = 32

DEFAULT_TAG = "div"
DEFAULT_DOCTYPE = "html"

DOCTYPE_KEYWORD = "doctype"
TEXT_MARKER = "|"
COMMENT_MARKER = "/"
INLINE_CHILD_SEPARATOR = ": "
