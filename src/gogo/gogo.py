#!/usr/bin/env python3
"""
gogo - run a command with the variables of a named environment

Variables live in `.gogo.yaml` (current directory first, then the home
directory):

    encrypted: false
    envs:
      dev:
        DB_URL: postgres://localhost/dev
        TOKEN: s3cr3t

`gogo dev psql $DB_URL` substitutes `$DB_URL` in the arguments and exports
every variable of `dev` into the child's environment.

Encryption at rest:
  - `--encrypt` replaces every value with hex(nonce || AES-256-GCM(value)).
  - The key is the user's password padded/truncated to 32 bytes.
  - The password is kept in `~/.gogopasswd`, itself AES-256-GCM encrypted
    under a 32-byte key derived from the host's machine id, so the file is
    useless on another machine. It is created once and never overwritten.
  - `--decrypt` reverses the transition. Both rewrite the file in one atomic
    replace and write nothing when any value fails.

Limitations: values are encrypted one by one, so value lengths and which
values changed between two snapshots are visible. No file locking.
"""
from __future__ import annotations

import logging
import sys

from colorama import just_fix_windows_console
from pathlib import Path

from gogo.ui.cli import build_parser, resolve_command
from gogo.ui.constants import ERROR_COLOR, NOTICE_COLOR, paint
from gogo.utils.core import open_store
from gogo.utils.errors import GogoError, GogoNotice

logger = logging.getLogger("gogo")


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    just_fix_windows_console()
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    func = resolve_command(args)
    if func is None:
        parser.print_help()
        return 0

    try:
        args.store = open_store(Path.cwd())
        return func(args)
    except GogoNotice as e:
        print(paint(f"[=] {e}", NOTICE_COLOR))
        return e.exit_code
    except GogoError as e:
        logger.debug("command failed", exc_info=True)
        print(paint(f"[!] {e}", ERROR_COLOR), file=sys.stderr)
        return e.exit_code
    except OSError as e:
        print(paint(f"[!] {e}", ERROR_COLOR), file=sys.stderr)
        return 1
    except (KeyboardInterrupt, EOFError):
        print(file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
