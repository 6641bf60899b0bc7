import logging
import os

from pathlib import Path

logger = logging.getLogger(__name__)


def save_atomic(path: Path, text: str, mode: int = 0o644) -> None:
    """Replace ``path`` with ``text`` via a sibling temp file and os.replace.

    A failed write leaves the previous file untouched.
    """
    tmp = path.with_name(path.name + ".tmp")
    try:
        with tmp.open("w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp, mode)
        os.replace(tmp, path)
    except OSError:
        try:
            tmp.unlink()
        except FileNotFoundError:
            pass
        raise
    logger.debug("wrote %s", path)


def create_once(path: Path, text: str, mode: int = 0o600) -> bool:
    """Create ``path`` with ``text`` unless it already exists.

    Returns False without touching the file when it exists.
    """
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, mode)
    except FileExistsError:
        return False
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError:
        path.unlink()
        raise
    logger.debug("created %s", path)
    return True
