"""Parsing of textual `dependent->dependency` relations."""

from dataclasses import dataclass
from typing import Self

from ._errors import MalformedRelationError

DELIMITER = "->"


def _is_valid_entity(name: str, *, strict: bool) -> bool:
    if not name or DELIMITER in name:
        return False
    if any(ch.isspace() for ch in name):
        return False
    if strict:
        return len(name) == 1 and name.isprintable()
    return True


@dataclass(slots=True, frozen=True)
class Relation:
    """A directed edge meaning "dependent requires dependency".

    Attributes:
        dependent: The entity on the left-hand side.
        dependency: The entity on the right-hand side.

    """

    dependent: str
    dependency: str

    @classmethod
    def parse(cls, text: str, *, strict: bool = False, line_number: int | None = None) -> Self:
        """Parse a single relation token such as ``A->B``.

        In strict mode the token must be exactly four characters long, with one
        printable, non-whitespace character on each side of the delimiter, so
        `` ->B`` is rejected even though it has the legacy length. Otherwise
        operands may be any non-empty, whitespace-free names, but the delimiter
        must still occur exactly once.

        Args:
            text: The raw token (line terminators already removed).
            strict: Enforce the legacy single-character format.
            line_number: 1-based line number, used in error messages.

        Returns:
            The parsed Relation.

        Raises:
            MalformedRelationError: If the token is not a well-formed relation.

        """
        dependent, sep, dependency = text.partition(DELIMITER)
        if not sep:
            raise MalformedRelationError(text, line_number, strict=strict)
        if not (_is_valid_entity(dependent, strict=strict) and _is_valid_entity(dependency, strict=strict)):
            raise MalformedRelationError(text, line_number, strict=strict)
        return cls(dependent=dependent, dependency=dependency)

    def __str__(self) -> str:
        return f"{self.dependent}{DELIMITER}{self.dependency}"
