"""Shared fixtures for the hostfetch test suite."""

import io
import re

import pytest

from core.models import HostIdentity, RenderContext

LINUX = HostIdentity(os_name="Linux", kernel_release="6.1.0-18-amd64", machine="x86_64")
FREEBSD = HostIdentity(os_name="FreeBSD", kernel_release="14.0-RELEASE", machine="amd64")
OPENBSD = HostIdentity(os_name="OpenBSD", kernel_release="7.5", machine="amd64")

CSI = re.compile(r"\x1b\[(\??)(\d*)([A-Za-z])")


def make_ctx(host: HostIdentity = LINUX, **overrides) -> RenderContext:
    fields = {
        "host": host,
        "align": 7,
        "environ": {},
        "stream": io.StringIO(),
    }
    fields.update(overrides)
    return RenderContext(**fields)


def screen_columns(line: str) -> list[int]:
    """
    Column of every printable character of `line` on a terminal that honors
    relative cursor moves (CUF/CUB) and ignores SGR and mode sequences.
    """
    columns = []
    col = 0
    pos = 0
    while pos < len(line):
        match = CSI.match(line, pos)
        if match:
            _, count, final = match.groups()
            n = int(count or 1)
            if final == "C":
                col += n
            elif final == "D":
                col = max(0, col - n)
            pos = match.end()
            continue
        columns.append(col)
        col += 1
        pos += 1
    return columns


def strip_escapes(text: str) -> str:
    return CSI.sub("", text)


def value_column(line: str, value: str) -> int:
    """Screen column where the last occurrence of `value` starts."""
    visible_index = len(strip_escapes(line[: line.rindex(value)]))
    return screen_columns(line)[visible_index]


@pytest.fixture
def ctx() -> RenderContext:
    return make_ctx()
