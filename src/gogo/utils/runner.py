import logging
import os
import subprocess
import sys
import threading

from typing import Dict, List, Mapping

from gogo.ui.constants import STDERR_COLOR, paint
from gogo.utils.errors import CommandNotFound, GogoError, InvalidVariable

logger = logging.getLogger(__name__)


def substitute(tokens: List[str], variables: Mapping[str, str]) -> List[str]:
    """Replace ``$NAME`` in every token, longest names first."""
    names = sorted(variables, key=len, reverse=True)
    out = []
    for token in tokens:
        for name in names:
            token = token.replace("$" + name, variables[name])
        out.append(token)
    return out


def build_command(tokens: List[str], variables: Mapping[str, str]) -> List[str]:
    """Substitute variables, then split the first token on whitespace so ``"ls -la"`` works as one argument."""
    if not tokens:
        raise GogoError("no command given")
    tokens = substitute(tokens, variables)
    argv = tokens[0].split() + tokens[1:]
    if not argv:
        raise GogoError("no command given")
    return argv


def child_env(variables: Mapping[str, str]) -> Dict[str, str]:
    for name, value in variables.items():
        if not name or "=" in name or "\0" in name:
            raise InvalidVariable(f"{name!r} can't be used as an environment variable name")
        if "\0" in value:
            raise InvalidVariable(f"value of {name} contains a NUL character")
    env = dict(os.environ)
    env.update(variables)
    return env


def _relay_stderr(stream, out) -> None:
    for line in stream:
        print(paint(line.rstrip("\n"), STDERR_COLOR), file=out, flush=True)


def run(argv: List[str], variables: Mapping[str, str], stdout=None, stderr=None) -> int:
    """Run ``argv`` with ``variables`` exported and return its exit code.

    stdout is relayed as-is; stderr is relayed in red from a helper thread so
    neither pipe can fill up and stall the child.
    """
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    logger.debug("running %s", argv)
    try:
        proc = subprocess.Popen(
            argv,
            env=child_env(variables),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except FileNotFoundError as e:
        raise CommandNotFound(f"command not found: {argv[0]}") from e
    except PermissionError as e:
        raise CommandNotFound(f"permission denied: {argv[0]}", exit_code=126) from e
    except ValueError as e:
        raise GogoError(f"could not start {argv[0]}: {e}") from e

    relay = threading.Thread(target=_relay_stderr, args=(proc.stderr, stderr), daemon=True)
    relay.start()
    for line in proc.stdout:
        stdout.write(line)
        stdout.flush()
    code = proc.wait()
    relay.join()
    logger.debug("%s exited with %d", argv[0], code)
    return code
