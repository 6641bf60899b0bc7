import argparse
import logging
import shlex

from gogo import __version__
from gogo.storage.config import ConfigStore
from gogo.storage.passwd import KeyMaterialProvider
from gogo.ui.constants import INFO_COLOR, paint
from gogo.utils.helper import ask, gogo_paths, home_dir
from gogo.utils.runner import build_command, run

logger = logging.getLogger(__name__)


def open_store(cwd, home=None) -> ConfigStore:
    home = home or home_dir()
    keys = KeyMaterialProvider(gogo_paths(cwd, home)["passwd"])
    return ConfigStore(cwd, home, keys)


def _environment(args: argparse.Namespace) -> str:
    return args.env or ask("Enter env name: ")


def cmd_init(args: argparse.Namespace) -> int:
    env = _environment(args)
    path = args.store.init(env)
    print(paint(f"[+] {path.name} created with env {env}", INFO_COLOR))
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    env = _environment(args)
    variables = args.store.get_environment(env)
    if not variables:
        print(paint(f"(no variables in {env})", INFO_COLOR))
    for name, value in variables.items():
        print(paint(f" - {name}={value}", INFO_COLOR))
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    env = _environment(args)
    name = ask("Enter variable name: ")
    value = ask("Enter variable value: ")
    args.store.add_variable(env, name, value)
    print(paint(f"[+] Var added to env {env}: {name}", INFO_COLOR))
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    print(__version__)
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    env = args.env
    logger.info("env: %s", env)
    variables = args.store.get_environment(env)
    for name in variables:
        logger.info(" - inject %s", name)

    argv = build_command(args.command, variables)
    if args.dry:
        print(shlex.join(argv))
        return 0
    return run(argv, variables)
