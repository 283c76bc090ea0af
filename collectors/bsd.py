"""
    BSD specific collectors (FreeBSD, DragonFly, OpenBSD, NetBSD).
    Everything here goes through sysctl(8) or the base system tools.
"""
import logging
from typing import Optional

from helpers.unix import has_cmd, cmd_output, list_dir

logger = logging.getLogger(__name__)


def sysctl(*names: str) -> list[str]:
    """Values of the given sysctl names, one per line; [] on failure."""
    out = cmd_output(["sysctl", "-n", *names])
    return out.splitlines() if out else []


def _to_int(value: str) -> Optional[int]:
    try:
        return int(value.strip())
    except ValueError:
        return None


def get_openbsd_distro(kernel_release: str) -> str:
    """
    OpenBSD: distribution token and the -current qualifier from kern.version.

    Typical first line:
      "OpenBSD 7.5-current (GENERIC.MP) #12: Mon Apr  1 10:10:10 MDT 2024"
    """
    lines = sysctl("kern.version")
    tokens = lines[0].split() if lines else []
    if not tokens:
        return ""

    distro = f"{tokens[0]} {kernel_release}"
    if len(tokens) > 1 and tokens[1].endswith("-current"):
        distro += "-current"
    return distro


def get_bsd_host(os_name: str) -> str:
    """hw.vendor + hw.product where the system has them, else hw.model."""
    if os_name in ("OpenBSD", "NetBSD"):
        vendor_product = " ".join(sysctl("hw.vendor", "hw.product"))
        if vendor_product:
            return vendor_product
    return " ".join(sysctl("hw.model"))


def get_bsd_package_count(os_name: str) -> int:
    """
    Installed packages with the base package tool of each BSD:
      - FreeBSD / DragonFly: pkg info
      - OpenBSD: one directory per package in /var/db/pkg
      - NetBSD: pkg_info
    """
    if os_name in ("FreeBSD", "DragonFly"):
        if not has_cmd("pkg"):
            return 0
        out = cmd_output(["pkg", "info"])
    elif os_name == "OpenBSD":
        return len(list_dir("var/db/pkg/*"))
    elif os_name == "NetBSD":
        if not has_cmd("pkg_info"):
            return 0
        out = cmd_output(["pkg_info"])
    else:
        return 0

    return len([line for line in out.splitlines() if line.strip()])


def get_bsd_memory(os_name: str) -> tuple[Optional[int], Optional[int]]:
    """
    (used, full) in MiB.

    FreeBSD / DragonFly:
      full = hw.physmem
      used = full - (inactive + free + cache pages) * page size

    OpenBSD:
      full = hw.physmem
      used = third column of the last vmstat line (active virtual memory, "123M")
    """
    physmem = sysctl("hw.physmem64" if os_name == "NetBSD" else "hw.physmem")
    full_bytes = _to_int(physmem[0]) if physmem else None
    full = full_bytes // 1024 // 1024 if full_bytes is not None else None
    used: Optional[int] = None

    if os_name in ("FreeBSD", "DragonFly"):
        values = [_to_int(v) for v in sysctl(
            "hw.pagesize",
            "vm.stats.vm.v_inactive_count",
            "vm.stats.vm.v_free_count",
        )]
        # v_cache_count is gone on newer FreeBSD releases, and sysctl fails
        # the whole call on an unknown oid, so it is asked for on its own.
        cache_count = sysctl("vm.stats.vm.v_cache_count")
        cache = _to_int(cache_count[0]) if cache_count else 0
        if full_bytes is not None and len(values) == 3 and None not in values and cache is not None:
            pagesize, inactive, free = values
            used = (full_bytes - (inactive + free + cache) * pagesize) // 1024 // 1024

    elif os_name == "OpenBSD":
        lines = cmd_output(["vmstat"]).splitlines()
        fields = lines[-1].split() if lines else []
        if len(fields) >= 3:
            used = _to_int(fields[2].rstrip("M"))

    logger.debug("%s memory: used=%s full=%s", os_name, used, full)
    return used, full
