import argparse

from gogo.utils.core import cmd_add, cmd_init, cmd_list, cmd_run, cmd_version
from gogo.utils.dataModels import GOGO_YAML
from gogo.utils.maintain import cmd_decrypt, cmd_encrypt

USAGE = """
  gogo <env> command [command arguments...]
  gogo [options] <env>"""


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gogo",
        usage=USAGE,
        description="gogo - a tool to run a command in a given environment",
    )

    actions = p.add_mutually_exclusive_group()
    actions.add_argument("--init", dest="func", action="store_const", const=cmd_init, help=f"create {GOGO_YAML}")
    actions.add_argument("--list", dest="func", action="store_const", const=cmd_list, help="list variables")
    actions.add_argument("--add", dest="func", action="store_const", const=cmd_add, help="add a variable to an env")
    actions.add_argument("--encrypt", dest="func", action="store_const", const=cmd_encrypt, help=f"encrypt {GOGO_YAML}")
    actions.add_argument("--decrypt", dest="func", action="store_const", const=cmd_decrypt, help=f"decrypt {GOGO_YAML}")
    actions.add_argument("--version", dest="func", action="store_const", const=cmd_version, help="display version")

    p.add_argument("--dry", action="store_true", help="print the command instead of running it")
    p.add_argument("--verbose", action="store_true", help="verbose mode")
    p.add_argument("env", nargs="?", help="environment name")
    p.add_argument("command", nargs=argparse.REMAINDER, help="command to run and its arguments")
    p.set_defaults(func=None)
    return p


def resolve_command(args: argparse.Namespace):
    """Pick the handler: an explicit action, else run when an env is given."""
    if args.func is not None:
        return args.func
    if args.env:
        return cmd_run
    return None
