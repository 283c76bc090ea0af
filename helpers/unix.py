import logging
import shutil
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def has_cmd(name: str) -> bool:
    """True when `name` resolves to an executable on PATH."""
    return shutil.which(name) is not None


def run_cmd(cmd: list[str], timeout_s: int = 10) -> tuple[int, str, str]:
    """
    Run a command and return:
      - return code (rc)
      - stdout (string)
      - stderr (string)

    A missing binary, a permission problem or a timeout never raises; they
    come back as rc 127 / 126 / 124 with the reason in stderr, the same
    codes a POSIX shell would report.
    """

    try:
        p = subprocess.run(
            cmd,
            text=True,              # decode output to str instead of bytes
            capture_output=True,    # capture stdout/stderr
            timeout=timeout_s
        )
    except FileNotFoundError as e:
        rc, stdout, stderr = 127, "", str(e)
    except PermissionError as e:
        rc, stdout, stderr = 126, "", str(e)
    except subprocess.TimeoutExpired as e:
        rc, stdout, stderr = 124, "", str(e)
    else:
        # Normalise None -> "" and strip whitespace
        rc, stdout, stderr = p.returncode, (p.stdout or "").strip(), (p.stderr or "").strip()

    logger.debug("command finished: %s", get_evidence(cmd, rc, stdout[:200], stderr))
    return rc, stdout, stderr


def cmd_output(cmd: list[str]) -> str:
    """stdout of `cmd` when it succeeded, otherwise an empty string."""
    rc, stdout, _ = run_cmd(cmd)
    return stdout if rc == 0 else ""


def read_file(path: str | Path) -> str:
    """Whole file contents, or "" when it is missing or unreadable."""
    try:
        # Device tree strings are NUL terminated.
        return Path(path).read_text(encoding="utf-8").replace("\x00", "")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("could not read %s: %s", path, e)
        return ""


def read_first_line(path: str | Path) -> str:
    text = read_file(path)
    return text.splitlines()[0].strip() if text.strip() else ""


def list_dir(pattern: str, root: str | Path = "/") -> list[str]:
    """Paths matching a glob `pattern` under `root`; [] when nothing matches."""
    try:
        return sorted(str(p) for p in Path(root).glob(pattern))
    except OSError as e:
        logger.debug("could not list %s/%s: %s", root, pattern, e)
        return []


def get_evidence(cmd, rc, stdout, stderr):

    return {
        "cmd": cmd,
        "rc": rc,
        "stdout": stdout,
        "stderr": stderr
    }
