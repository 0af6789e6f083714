"""Utility functions for fieldschema"""

import logging
from pathlib import Path
from typing import Iterable

from .errors import SchemaTransformError


def canonicalify(p: Path | str) -> Path:
    return Path(p).expanduser().resolve()


def ensure_path(p: Path | str) -> Path:
    path = canonicalify(p)
    path.mkdir(parents=True, exist_ok=True)
    return path


def join_path(parts: Iterable[str], key: str | None = None) -> str:
    """Render a schema location as a dotted path for log and error messages.

    Examples:
        >>> join_path(["nested", "deep"], "data")
        'nested.deep.data'
        >>> join_path([])
        '<root>'
    """
    segments = list(parts)
    if key is not None:
        segments.append(key)
    return ".".join(segments) if segments else "<root>"


def report_mismatch(
    logger: logging.Logger, strict: bool, path: str, message: str
) -> None:
    """Handle a transform spec entry whose shape does not fit its target.

    Raises ``SchemaTransformError`` in strict mode, otherwise logs a warning
    and lets the caller leave the target untouched.
    """
    if strict:
        raise SchemaTransformError(f"{path}: {message}", path=path)

    logger.warning(f"Ignoring {path}: {message}")
