from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from ..paths import hardware_allowed, is_real_sysfs_path

logger = logging.getLogger(__name__)


def read_text(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.debug("sysfs.read %s failed: %s", path, exc)
        return None


def read_tokens(path: Path) -> Optional[list[str]]:
    text = read_text(path)
    if text is None:
        return None
    return text.split()


def parse_unsigned(token: str) -> Optional[int]:
    # Attribute values are plain decimal; reject signs and anything else int() would take.
    if not (token.isascii() and token.isdigit()):
        return None
    return int(token)


def read_unsigned(path: Path) -> Optional[int]:
    tokens = read_tokens(path)
    if not tokens:
        return None
    value = parse_unsigned(tokens[0])
    if value is None:
        logger.debug("sysfs.read %s: not a non-negative integer: %r", path, tokens[0])
    return value


def safe_write_text(path: Path, content: str) -> None:
    # Writes under /sys are refused or skipped inside pytest runs.
    if os.environ.get("PYTEST_CURRENT_TEST") and not hardware_allowed() and is_real_sysfs_path(path):
        if os.environ.get("SYSLED_TEST_HARDWARE_TRIPWIRE") == "1":
            raise RuntimeError(f"Refusing to write real sysfs path under pytest: {path}")
        return

    logger.debug("sysfs.write %s <- %r", path, content)
    path.write_text(content, encoding="utf-8")
