import logging
import time
from typing import Optional

import psutil

logger = logging.getLogger(__name__)


def get_uptime_seconds() -> Optional[int]:
    """
        Seconds since boot, from psutil's boot time (kern.boottime on the BSDs
        and macOS). None when the platform does not expose it.
    """
    try:
        return int(time.time() - psutil.boot_time())
    except (OSError, RuntimeError, psutil.Error) as e:
        logger.debug("boot time unavailable: %s", e)
        return None


def get_memory_mib() -> tuple[Optional[int], Optional[int]]:
    """(used, full) memory in MiB, computed as total minus available."""
    try:
        vm = psutil.virtual_memory()
    except (OSError, RuntimeError, psutil.Error) as e:
        logger.debug("virtual memory unavailable: %s", e)
        return None, None
    return (vm.total - vm.available) // 1024 // 1024, vm.total // 1024 // 1024
