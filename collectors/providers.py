"""
    Fact providers.

    One function per displayed line. Each takes the run's RenderContext,
    picks the collector for the host's OS family and returns a Fact, or None
    when there is nothing worth showing. Providers never raise for a missing
    file or command; the value just comes back empty or with a "?".
"""
import logging
import os
from typing import Optional

from collectors import bsd, mac
from collectors.linux import linux_system
from core.escapes import sgr
from core.models import Fact, RenderContext
from shared import hardware, system

logger = logging.getLogger(__name__)

# Placeholder words firmware vendors leave in DMI / sysctl model strings.
OEM_BLACKLIST = frozenset({
    "To", "Be", "be", "Filled", "filled", "By", "by", "O.E.M.", "OEM",
    "Not", "Applicable", "Specified", "System", "Product", "Name",
    "Version", "Undefined", "Default", "string", "INVALID", "�", "os",
    "Type1ProductConfigId",
})

# Fewer packages than this is treated as noise.
MIN_PACKAGES = 10


def _fact(name: str, value) -> Fact:
    return Fact(name=name, label=name, value=value or "")


def strip_oem_words(text: str) -> str:
    return " ".join(word for word in text.split() if word not in OEM_BLACKLIST)


def format_uptime(seconds: int) -> str:
    """
    "<d>d <h>h <m>m " with zero components left out; "0m" when all are zero.

        >>> format_uptime(90000)
        '1d 1h '
    """
    # A boot time in the future (clock skew) counts as no uptime.
    seconds = max(seconds, 0)
    days = seconds // 86400
    hours = seconds // 3600 % 24
    minutes = seconds // 60 % 60

    uptime = ""
    if days:
        uptime += f"{days}d "
    if hours:
        uptime += f"{hours}h "
    if minutes:
        uptime += f"{minutes}m "
    return uptime or "0m"


def format_memory(used: Optional[int], full: Optional[int]) -> str:
    used_s = "?" if used is None else str(used)
    full_s = "?" if full is None else str(full)
    return f"{used_s}M / {full_s}M"


def get_os(ctx: RenderContext) -> Fact:
    host = ctx.host
    family = system.get_os(host)

    distro = ""
    if family == "linux":
        distro = linux_system.get_linux_distro(host.kernel_release, ctx.environ)
    elif host.family == "OpenBSD":
        distro = bsd.get_openbsd_distro(host.kernel_release)
    elif family == "mac":
        distro = mac.get_mac_distro()

    if not distro.strip():
        distro = f"{host.os_name} {host.kernel_release}"
    return _fact("os", distro)


def get_kernel(ctx: RenderContext) -> Optional[Fact]:
    # The BSD os line already carries the release.
    if ctx.host.is_bsd:
        return None
    return _fact("kernel", ctx.host.kernel_release)


def get_host(ctx: RenderContext) -> Fact:
    family = system.get_os(ctx.host)

    raw = ""
    if family == "linux":
        raw = linux_system.get_linux_host()
    elif family == "bsd":
        raw = bsd.get_bsd_host(ctx.host.os_name)
    elif family == "mac":
        raw = mac.get_mac_host()

    host = strip_oem_words(raw)
    return _fact("host", host or ctx.host.machine)


def get_uptime(ctx: RenderContext) -> Optional[Fact]:
    if system.get_os(ctx.host) == "linux":
        seconds = linux_system.get_linux_uptime_seconds()
    else:
        seconds = hardware.get_uptime_seconds()

    if seconds is None:
        logger.debug("uptime unavailable on %s", ctx.host.os_name)
        return None
    return _fact("uptime", format_uptime(seconds))


def get_pkgs(ctx: RenderContext) -> Optional[Fact]:
    family = system.get_os(ctx.host)

    count = 0
    if family == "linux":
        count = linux_system.get_linux_package_count(ctx.environ)
    elif family == "bsd":
        count = bsd.get_bsd_package_count(ctx.host.os_name)
    elif family == "mac":
        count = mac.get_mac_package_count()

    if count < MIN_PACKAGES:
        logger.debug("%d packages, not shown", count)
        return None
    return _fact("pkgs", str(count))


def get_memory(ctx: RenderContext) -> Fact:
    family = system.get_os(ctx.host)

    if family == "linux" or ctx.host.family == "NetBSD":
        used, full = linux_system.get_linux_memory()
        if full is None and family == "bsd":
            used, full = bsd.get_bsd_memory(ctx.host.os_name)
    elif family == "bsd":
        used, full = bsd.get_bsd_memory(ctx.host.os_name)
    else:
        used, full = hardware.get_memory_mib()

    return _fact("memory", format_memory(used, full))


def get_de(ctx: RenderContext) -> Fact:
    return _fact("de", ctx.env("XDG_CURRENT_DESKTOP") or ctx.env("DESKTOP_SESSION"))


def get_shell(ctx: RenderContext) -> Fact:
    return _fact("shell", os.path.basename(ctx.env("SHELL")))


def get_editor(ctx: RenderContext) -> Fact:
    editor = ctx.env("VISUAL") or ctx.env("EDITOR")
    return _fact("editor", os.path.basename(editor))


def build_palette(ctx: RenderContext) -> str:
    """
    Reverse video, then two blank cells in each of colors 1-6, then reset.
    With reverse video on, the foreground color paints the cell background.
    """
    cells = "".join(f"{sgr(ctx, f'3{n}')} {sgr(ctx, f'3{n}')} " for n in range(1, 7))
    return f"{sgr(ctx, 7)}{cells}{sgr(ctx, 0)}"


def get_palette(ctx: RenderContext) -> Fact:
    return Fact(
        name="palette",
        label=build_palette(ctx),
        value=" ",
        show_separator=False,
        blank_before=True,
    )
