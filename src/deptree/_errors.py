"""Error types raised while loading and rendering dependency graphs."""

from pathlib import Path


class DeptreeError(Exception):
    """Base class for errors that terminate a deptree run."""

    exit_code: int = 1


class FileUnreadableError(DeptreeError):
    """Raised when the input file is missing or cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read file {path} ({reason})")


class EmptyInputError(DeptreeError):
    """Raised when the input yields no relations."""


class MalformedRelationError(DeptreeError):
    """Raised when a line is not a well-formed `A->B` relation."""

    def __init__(self, line: str, line_number: int | None = None, *, strict: bool = False) -> None:
        self.line = line
        self.line_number = line_number
        self.strict = strict
        where = f"Line {line_number}" if line_number is not None else "Relation"
        expected = "each line needs to look like A->B" if strict else "expected <dependent>-><dependency>"
        super().__init__(f"{where} is not formatted correctly: {line!r} ({expected})")


class UnknownEntityError(DeptreeError):
    """Raised when a requested start entity does not exist in the graph."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Entity not found in graph: {name!r}")
