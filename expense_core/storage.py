"""Persistence utilities for the expense tracker core."""

from __future__ import annotations

import contextlib
import logging
from pathlib import Path
from typing import Iterable, List, Protocol

from .exceptions import PersistenceError

logger = logging.getLogger(__name__)


class LineStorage(Protocol):
    """Load/save contract the expense store persists through."""

    def load(self) -> List[str]:
        ...

    def save(self, lines: Iterable[str]) -> None:
        ...


class TextFileStorage:
    """Flat text file storage, one record per line, with crash-safe writes."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    def load(self) -> List[str]:
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                lines = [line.rstrip("\r\n") for line in handle]
        except FileNotFoundError as exc:
            raise PersistenceError(f"{self._path} (No such file or directory)") from exc
        except UnicodeDecodeError as exc:
            raise PersistenceError(f"{self._path} is not valid UTF-8 text") from exc
        except OSError as exc:
            raise PersistenceError(f"Unable to read from {self._path}: {exc}") from exc
        logger.debug("Read %d lines from %s", len(lines), self._path)
        return lines

    def save(self, lines: Iterable[str]) -> None:
        temp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8", newline="\n") as handle:
                for line in lines:
                    handle.write(line)
                    handle.write("\n")
                handle.flush()
            # Use replace for atomic move on POSIX; the target is never half-written.
            temp_path.replace(self._path)
        except (OSError, UnicodeEncodeError) as exc:
            with contextlib.suppress(OSError):
                temp_path.unlink(missing_ok=True)
            raise PersistenceError(f"Unable to write to {self._path}: {exc}") from exc

    @property
    def path(self) -> Path:
        return self._path


class MemoryStorage:
    """In-process storage keeping the last saved lines, used as a test double."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self.lines: List[str] = list(lines)
        self.save_count = 0

    def load(self) -> List[str]:
        return list(self.lines)

    def save(self, lines: Iterable[str]) -> None:
        self.lines = list(lines)
        self.save_count += 1
