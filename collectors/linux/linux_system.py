from helpers.unix import has_cmd, cmd_output, read_file, read_first_line, list_dir
import logging
import os
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

OS_RELEASE = "/etc/os-release"
PROC_UPTIME = "/proc/uptime"
PROC_MEMINFO = "/proc/meminfo"

# Read in this order and joined with spaces.
HOST_FILES = (
    "/sys/devices/virtual/dmi/id/product_name",
    "/sys/devices/virtual/dmi/id/product_version",
    "/sys/firmware/devicetree/base/model",
)

# (marker binary, listing command), in priority order. Every installed
# manager contributes, so hosts with several of them add up.
PACKAGE_COMMANDS: tuple[tuple[str, list[str]], ...] = (
    ("bonsai", ["bonsai", "list"]),
    ("crux", ["pkginfo", "-i"]),
    ("pacman-key", ["pacman", "-Qq"]),
    ("dpkg", ["dpkg-query", "-f", ".\n", "-W"]),
    ("rpm", ["rpm", "-qa"]),
    ("xbps-query", ["xbps-query", "-l"]),
    ("apk", ["apk", "info"]),
    ("guix", ["guix", "package", "--list-installed"]),
    ("opkg", ["opkg", "list-installed"]),
)

# (marker binary, glob under /) for managers that keep one entry per package.
PACKAGE_DIRS: tuple[tuple[str, str], ...] = (
    ("kiss", "var/db/kiss/installed/*"),
    ("cpt-list", "var/db/cpt/installed/*"),
    ("emerge", "var/db/pkg/*/*"),
    ("pkgtool", "var/log/packages/*"),
    ("eopkg", "var/lib/eopkg/package/*"),
)

# Lines that count towards "used", see get_linux_memory().
MEM_ADD = {"MemTotal", "Shmem"}
MEM_SUB = {"MemFree", "Buffers", "Cached", "SReclaimable"}


# -----------------------------
# 1) Distribution name
# -----------------------------
def parse_os_release(text: str) -> str:
    """
    PRETTY_NAME from os-release formatted text, surrounding quotes removed.

    Typical line:
      PRETTY_NAME="Debian GNU/Linux 12 (bookworm)"
    """
    distro = ""
    for line in text.splitlines():
        key, sep, val = line.partition("=")
        if sep and key.strip() == "PRETTY_NAME":
            distro = val.strip()
    return distro.strip("\"'")


def get_linux_distro(kernel_release: str, environ: Mapping[str, str]) -> str:
    """
    Linux: human readable distribution name.

    Primary command:
      - lsb_release -sd

    Fallback:
      - PRETTY_NAME in /etc/os-release

    A few systems are recognised by other means (Android, Guix, Bedrock)
    and WSL gets a suffix. Returns "" when nothing is found.
    """
    distro = ""
    if has_cmd("lsb_release"):
        distro = cmd_output(["lsb_release", "-sd"])
    if not distro:
        logger.debug("no lsb_release output, reading %s", OS_RELEASE)
        distro = parse_os_release(read_file(OS_RELEASE))
    distro = distro.strip("\"'")

    if os.path.isdir("/system/app") and os.path.isdir("/system/priv-app"):
        distro = f"Android {cmd_output(['getprop', 'ro.build.version.release'])}"
    if has_cmd("guix"):
        distro = "Guix System"
    if "/bedrock/cross/" in environ.get("PATH", ""):
        distro = "Bedrock Linux"

    if environ.get("WSLENV"):
        distro = f"{distro} on Windows 10 [WSL2]"
    elif kernel_release.endswith("-Microsoft"):
        distro = f"{distro} on Windows 10 [WSL1]"

    return distro


# -----------------------------
# 2) Host model
# -----------------------------
def get_linux_host() -> str:
    """DMI product name + version and the device-tree model (ARM boards)."""
    return " ".join(read_first_line(path) for path in HOST_FILES)


# -----------------------------
# 3) Uptime
# -----------------------------
def parse_proc_uptime(text: str) -> Optional[int]:
    """
    Whole seconds from /proc/uptime.

    Typical content:
      "350735.47 234388.90"
    """
    first = text.split()[0] if text.split() else ""
    try:
        return int(first.split(".")[0])
    except ValueError:
        return None


def get_linux_uptime_seconds() -> Optional[int]:
    return parse_proc_uptime(read_file(PROC_UPTIME))


# -----------------------------
# 4) Packages
# -----------------------------
def count_lines(text: str) -> int:
    return len([line for line in text.splitlines() if line.strip()])


def get_linux_package_count(environ: Mapping[str, str]) -> int:
    """
    Linux: total number of installed packages across every manager found.

    Command based managers are counted by their listing output, directory
    based ones by their database entries. brew and nix need two steps.
    """
    total = 0

    for binary, cmd in PACKAGE_COMMANDS:
        if has_cmd(binary):
            total += count_lines(cmd_output(cmd))

    for binary, pattern in PACKAGE_DIRS:
        if has_cmd(binary):
            total += len(list_dir(pattern))

    if has_cmd("brew"):
        cellar = cmd_output(["brew", "--cellar"])
        if cellar:
            total += len(list_dir("*", cellar))

    if has_cmd("nix-store"):
        home = environ.get("HOME", "")
        for profile in ("/run/current-system/sw", os.path.join(home, ".nix-profile")):
            total += count_lines(cmd_output(["nix-store", "-q", "--requisites", profile]))

    return total


# -----------------------------
# 5) Memory
# -----------------------------
def parse_meminfo(text: str) -> tuple[Optional[int], Optional[int]]:
    """
    (used, full) in MiB from /proc/meminfo formatted text.

    Lines look like:
      MemTotal:       16303428 kB

    used = MemTotal + Shmem - MemFree - Buffers - Cached - SReclaimable,
    unless MemAvailable is present, in which case used = MemTotal - MemAvailable.
    """
    used = 0
    full: Optional[int] = None
    available: Optional[int] = None

    for line in text.splitlines():
        key, sep, rest = line.partition(":")
        if not sep:
            continue
        try:
            kib = int(rest.split()[0])
        except (IndexError, ValueError):
            continue

        if key in MEM_ADD:
            used += kib
        elif key in MEM_SUB:
            used -= kib

        if key == "MemTotal":
            full = kib
        elif key == "MemAvailable":
            available = kib

    if full is None:
        return None, None
    if available is not None:
        used = full - available

    return used // 1024, full // 1024


def get_linux_memory() -> tuple[Optional[int], Optional[int]]:
    return parse_meminfo(read_file(PROC_MEMINFO))
