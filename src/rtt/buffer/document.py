"""Plain-text persistence for buffers: one document line per text line."""

from __future__ import annotations

import os
import tempfile
from typing import Iterable, List


class DocumentError(RuntimeError):
    """Raised when a document cannot be read from or written to disk."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


def read_lines(path: str, *, encoding: str = "utf-8") -> List[str]:
    """Return the file's lines with newline conventions normalized.

    Universal newline mode folds ``\\r\\n`` and ``\\r`` into ``\\n``; the
    terminators are stripped. An empty file yields no lines.
    """

    try:
        with open(path, "r", encoding=encoding, newline=None) as handle:
            return [raw.rstrip("\n") for raw in handle]
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentError(_reason(exc), path=path) from exc


def write_lines(path: str, lines: Iterable[str], *, encoding: str = "utf-8") -> int:
    """Write ``lines`` joined by newlines to ``path``; returns characters written.

    Text mode translates each newline to the platform convention. An
    existing file is replaced atomically: content goes to a temporary file
    next to it, takes over its mode and is then renamed into place, so a
    failed write leaves the original untouched. A new file is created
    exclusively with the default (umask-filtered) mode and removed again if
    the write fails.
    """

    text = "\n".join(lines)
    try:
        mode = os.stat(path).st_mode & 0o7777
    except FileNotFoundError:
        return _write_new(path, text, encoding)
    except OSError as exc:
        raise DocumentError(_reason(exc), path=path) from exc

    directory = os.path.dirname(os.path.abspath(path))
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(
            prefix=".rtt-", suffix=".tmp", dir=directory
        )
        with os.fdopen(fd, "w", encoding=encoding) as handle:
            written = handle.write(text)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
        tmp_path = None
        return written
    except (OSError, UnicodeEncodeError) as exc:
        raise DocumentError(_reason(exc), path=path) from exc
    finally:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)


def _write_new(path: str, text: str, encoding: str) -> int:
    created = False
    try:
        with open(path, "x", encoding=encoding) as handle:
            created = True
            written = handle.write(text)
        created = False
        return written
    except (OSError, UnicodeEncodeError) as exc:
        raise DocumentError(_reason(exc), path=path) from exc
    finally:
        if created:
            os.unlink(path)


def _reason(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


__all__ = ["DocumentError", "read_lines", "write_lines"]
