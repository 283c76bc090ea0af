# core/models.py
from __future__ import annotations
import sys
from dataclasses import dataclass, field
from typing import Literal, Callable, Optional, TextIO

OsFamily = Literal["Linux", "Darwin", "FreeBSD", "DragonFly", "OpenBSD", "NetBSD", "Other"]


@dataclass(frozen=True)
class Fact:
    name: str
    label: str
    value: str = ""
    # Rendering hints, only the palette sets them.
    show_separator: bool = True
    blank_before: bool = False


@dataclass(frozen=True)
class HostIdentity:
    """OS name, kernel release and machine type, captured once per run."""
    os_name: str
    kernel_release: str
    machine: str

    @property
    def family(self) -> OsFamily:
        for family in ("Linux", "Darwin", "FreeBSD", "DragonFly", "OpenBSD", "NetBSD"):
            if self.os_name.startswith(family):
                return family
        return "Other"

    @property
    def is_bsd(self) -> bool:
        return "BSD" in self.os_name


@dataclass(frozen=True)
class RenderContext:
    host: HostIdentity
    color: bool = True
    label_color: int = 4
    value_color: int = 7
    separator: str = ": "
    align: int = 0
    term: str = ""
    environ: dict[str, str] = field(default_factory=dict)
    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def env(self, key: str, default: str = "") -> str:
        return self.environ.get(key) or default


Provider = Callable[[RenderContext], Optional[Fact]]
