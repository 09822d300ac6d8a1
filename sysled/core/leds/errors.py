"""Errors raised by LED device handles.

Construction failures come in three variants (see ``LedErrorKind``); writes
raise ``LedWriteError`` carrying the errno reported by the kernel.
"""

from __future__ import annotations

import errno as _errno
import os
from enum import Enum
from pathlib import Path
from typing import Optional


class LedErrorKind(str, Enum):
    INVALID_NAME = "invalid-name"
    NOT_FOUND = "not-found"
    PERMISSION_DENIED = "permission-denied"
    WRITE_FAILED = "write-failed"
    COLOR_VALUES = "color-values"


class LedError(Exception):
    kind: LedErrorKind = LedErrorKind.NOT_FOUND

    def __init__(self, message: str, *, errno: Optional[int] = None, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.errno = errno
        self.path = path


class InvalidLedName(LedError):
    kind = LedErrorKind.INVALID_NAME

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid LED name: {name!r}", errno=_errno.EINVAL)
        self.name = name


class LedNotFound(LedError):
    kind = LedErrorKind.NOT_FOUND

    def __init__(self, name: str, *, path: Optional[Path] = None) -> None:
        super().__init__(f"No such device: {name}", errno=_errno.ENODEV, path=path)
        self.name = name


class LedPermissionDenied(LedError):
    kind = LedErrorKind.PERMISSION_DENIED

    def __init__(self, path: Path, *, errno: int = _errno.EACCES) -> None:
        super().__init__(f"Permission denied: {path}", errno=errno, path=path)


class LedWriteError(LedError):
    kind = LedErrorKind.WRITE_FAILED

    def __init__(self, path: Path, errno: int) -> None:
        super().__init__(f"{os.strerror(errno)}: {path}", errno=errno, path=path)


class ColorValuesError(LedError):
    kind = LedErrorKind.COLOR_VALUES

    def __init__(self, message: str, *, expected: int, actual: int) -> None:
        super().__init__(message, errno=_errno.EINVAL)
        self.expected = expected
        self.actual = actual
