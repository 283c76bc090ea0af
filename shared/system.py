"""
    Shared utility functions for system information retrieval.
"""
import platform

from core.models import HostIdentity


def get_system_info() -> HostIdentity:
    """Capture OS name, kernel release and machine architecture."""
    uname = platform.uname()
    return HostIdentity(
        os_name=uname.system,
        kernel_release=uname.release,
        machine=uname.machine,
    )


def get_os(host: HostIdentity) -> str:
    """
        Returns a label for the OS family of `host`.
        Used by the providers as a switch for OS-specific implementations.
    """
    switcher = {
        "Linux": "linux",
        "Darwin": "mac",
        "FreeBSD": "bsd",
        "DragonFly": "bsd",
        "OpenBSD": "bsd",
        "NetBSD": "bsd",
    }
    return switcher.get(host.family, "other")
