import getpass
import os

from pathlib import Path
from typing import Dict

from gogo.utils.dataModels import GOGO_YAML, GOGO_PASSWD


def home_dir() -> Path:
    """Home directory holding the fallback config and the password file.

    ``GOGO_HOME`` overrides it so a sandbox never touches the real home.
    """
    override = os.environ.get("GOGO_HOME")
    return Path(override) if override else Path.home()


def gogo_paths(cwd: Path, home: Path) -> Dict[str, Path]:
    return {
        "local": cwd / GOGO_YAML,
        "home": home / GOGO_YAML,
        "passwd": home / GOGO_PASSWD,
    }


def rpad(s: str, pad: str, length: int) -> str:
    """Right-pad ``s`` with repeats of ``pad`` and cut to exactly ``length``.

    Inputs longer than ``length`` are truncated, so two passwords sharing
    their first ``length`` characters produce the same key.
    """
    if not pad:
        raise ValueError("pad string must not be empty")
    count = length // len(pad) + 1
    return (s + pad * count)[:length]


def ask(question: str) -> str:
    return input(question).rstrip("\n")


def ask_secret(question: str) -> str:
    return getpass.getpass(question)
