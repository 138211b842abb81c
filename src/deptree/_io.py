import logging
from pathlib import Path

from ._errors import EmptyInputError, FileUnreadableError

logger = logging.getLogger(__name__)

DEFAULT_INPUT = Path("graph.txt")


def read_relation_lines(path: Path, *, encoding: str = "utf-8") -> list[str]:
    """Read relation lines from a text file.

    Line terminators are stripped and every line, blank ones included, is
    returned verbatim for the builder to validate. A final line terminator
    does not produce an extra empty line.

    Args:
        path: File to read. May be relative to the working directory.
        encoding: Text encoding of the file.

    Returns:
        The lines, in file order.

    Raises:
        FileUnreadableError: If the file is missing, unreadable or not valid text.
        EmptyInputError: If the file holds nothing but whitespace.

    """
    try:
        text = path.read_text(encoding=encoding)
    except FileNotFoundError as e:
        raise FileUnreadableError(path, "no such file") from e
    except IsADirectoryError as e:
        raise FileUnreadableError(path, "is a directory") from e
    except PermissionError as e:
        raise FileUnreadableError(path, "permission denied") from e
    except UnicodeDecodeError as e:
        raise FileUnreadableError(path, f"not valid {encoding} text") from e
    except OSError as e:
        raise FileUnreadableError(path, e.strerror or str(e)) from e

    if not text.strip():
        msg = f"File {path} contains no relations"
        raise EmptyInputError(msg)

    lines = text.splitlines()
    logger.debug(f"Read {len(lines)} relation lines from {path}")
    return lines
