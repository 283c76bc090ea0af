"""
    Main entry point for hostfetch
"""
import logging
import os
import sys

from core.config import Settings
from core.orchestrator import run

__version__ = "0.1.0"
PROG = "hostfetch"

USAGE = f"""{PROG}     show system information
{PROG} -v  show version information"""


def configure_logging(debug: bool) -> None:
    """Diagnostics go to stderr, and only in debug mode."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.CRITICAL + 1,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
        force=True,
    )


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    arg = args[0] if args else ""

    if arg == "-v":
        print(f"{PROG} {__version__}")
        return 0

    if arg not in ("", "-d"):
        print(USAGE)
        return 0

    configure_logging(debug=arg == "-d")
    settings = Settings.from_env(os.environ)
    return run(settings, os.environ)


if __name__ == "__main__":
    sys.exit(main())
