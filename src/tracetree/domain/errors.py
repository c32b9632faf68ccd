from __future__ import annotations

"""
Domain Exceptions.

All failures raised by the tree builder and the queries derive from
TraceTreeError so that interface layers can trap them with a single clause.
"""


class TraceTreeError(Exception):
    """Base class for every error raised by the tracetree core."""


class TraceParseError(TraceTreeError):
    """
    Raised in strict mode when a trace line matches no known form.

    Attributes:
        line_number: 1-based position of the offending line.
        line: Raw line content.
    """

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"Unrecognized trace line {line_number}: {line!r}")


class QueryError(TraceTreeError):
    """Base class for query failures."""


class NoSufficientDirectoryError(QueryError):
    """Raised when no directory is large enough to free the required space."""

    def __init__(self, required: int) -> None:
        self.required = required
        super().__init__(f"No directory of at least {required} bytes exists in the tree.")


class UnknownQueryError(QueryError):
    """Raised when a query name is not present in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown query: {name!r}")
