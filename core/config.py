# core/config.py
"""
    Run settings read from the PF_* environment variables.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = ": "
DEFAULT_LABEL_COLOR = 4
DEFAULT_VALUE_COLOR = 7


def _int_or(value: Optional[str], default: Optional[int]) -> Optional[int]:
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        logger.debug("ignoring non-numeric setting %r", value)
        return default


def resolve_tmpdir(environ: Mapping[str, str]) -> str:
    """
    TMPDIR when it is a writable directory, otherwise the home directory.
    """
    tmpdir = environ.get("TMPDIR") or "/tmp"
    if os.path.isdir(tmpdir) and os.access(tmpdir, os.W_OK):
        return tmpdir

    home = environ.get("HOME") or str(Path.home())
    logger.debug("%s is not writable, using %s instead", tmpdir, home)
    return home


@dataclass(frozen=True)
class Settings:
    info: Optional[list[str]] = None
    color: bool = True
    label_color: int = DEFAULT_LABEL_COLOR
    value_color: int = DEFAULT_VALUE_COLOR
    separator: str = DEFAULT_SEPARATOR
    align: Optional[int] = None
    source: Optional[str] = None
    tmpdir: str = "/tmp"
    term: str = ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "Settings":
        info = environ.get("PF_INFO")
        return cls(
            info=info.split() if info else None,
            color=environ.get("PF_COLOR", "1") != "0",
            label_color=_int_or(environ.get("PF_COL1"), DEFAULT_LABEL_COLOR),
            value_color=_int_or(environ.get("PF_COL2"), DEFAULT_VALUE_COLOR),
            separator=environ.get("PF_SEP", DEFAULT_SEPARATOR),
            align=_int_or(environ.get("PF_ALIGN"), None),
            source=environ.get("PF_SOURCE") or None,
            tmpdir=resolve_tmpdir(environ),
            term=environ.get("TERM", ""),
        )
