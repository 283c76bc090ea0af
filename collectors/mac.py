"""
    macOS specific collectors and utilities.
"""
from helpers.unix import has_cmd, cmd_output, list_dir


def get_mac_distro() -> str:
    """Product name and version from sw_vers, e.g. "macOS 14.4"."""
    name = cmd_output(["sw_vers", "-productName"])
    version = cmd_output(["sw_vers", "-productVersion"])
    return f"{name} {version}".strip()


def get_mac_host() -> str:
    return cmd_output(["sysctl", "-n", "hw.model"])


def get_mac_package_count() -> int:
    """pkgin, Homebrew (cellar entries) and MacPorts, summed."""
    total = 0

    if has_cmd("pkgin"):
        total += len(cmd_output(["pkgin", "list"]).splitlines())

    if has_cmd("brew"):
        cellar = cmd_output(["brew", "--cellar"])
        if cellar:
            total += len(list_dir("*", cellar))

    if has_cmd("port"):
        # First line is the "The following ports are currently installed:" header.
        lines = cmd_output(["port", "installed"]).splitlines()
        total += max(len(lines) - 1, 0)

    return total
