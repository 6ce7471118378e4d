"""Kumihan exception hierarchy.

Keep this module small and dependency-free: every stage raises from here and
the outer surfaces (CLI, preview server) catch from here.
"""


class KumihanError(Exception):
    """Base exception for all Kumihan errors."""


class KumihanConfigError(KumihanError):
    """Raised for invalid parser or renderer configuration."""


class MarkupSyntaxError(KumihanError):
    """Raised when a source line cannot be parsed.

    The line parser only knows the reason; the tree builder fills in the
    line number and content through `locate` before the error propagates.
    """

    def __init__(
        self,
        reason: str,
        content: str | None = None,
        line_number: int | None = None,
    ):
        super().__init__(reason)
        self.reason = reason
        self.content = content
        self.line_number = line_number

    def locate(self, line_number: int, content: str) -> "MarkupSyntaxError":
        self.line_number = line_number
        if self.content is None:
            self.content = content
        return self

    def __str__(self) -> str:
        message = self.reason
        if self.content is not None:
            message = f"{message}: {self.content!r}"
        if self.line_number is not None:
            message = f"line {self.line_number}: {message}"
        return message
