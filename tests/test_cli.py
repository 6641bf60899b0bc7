import sys

import pytest
import yaml

from gogo import __version__
from gogo.gogo import main
from gogo.ui.cli import build_parser, resolve_command
from gogo.utils.core import cmd_run
from gogo.utils.dataModels import GOGO_YAML


def feed(monkeypatch, *answers, secret=None):
    replies = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))
    if secret is not None:
        monkeypatch.setattr("gogo.utils.maintain.ask_secret", lambda prompt: secret)


def test_parser_splits_env_and_command():
    args = build_parser().parse_args(["--verbose", "dev", "ls", "-la", "--version"])
    assert args.verbose is True
    assert args.env == "dev"
    assert args.command == ["ls", "-la", "--version"]
    assert resolve_command(args) is cmd_run


def test_parser_actions_are_exclusive():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--encrypt", "--decrypt"])


def test_no_arguments_prints_help(home, cwd, capsys):
    assert main([]) == 0
    assert "gogo" in capsys.readouterr().out


def test_version(home, cwd, capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == __version__


def test_init_add_list(home, cwd, monkeypatch, capsys):
    assert main(["--init", "dev"]) == 0
    assert (cwd / GOGO_YAML).exists()

    feed(monkeypatch, "TOKEN", "abc")
    assert main(["--add", "dev"]) == 0

    assert main(["--list", "dev"]) == 0
    assert "TOKEN=abc" in capsys.readouterr().out


def test_init_prompts_for_env(home, cwd, monkeypatch):
    feed(monkeypatch, "prod")
    assert main(["--init"]) == 0
    assert "prod" in yaml.safe_load((cwd / GOGO_YAML).read_text())["envs"]


def test_init_twice_reports_error(home, cwd, capsys):
    main(["--init", "dev"])
    assert main(["--init", "dev"]) == 1
    assert "already exists" in capsys.readouterr().err


def test_missing_config_is_reported(home, cwd, capsys):
    assert main(["--list", "dev"]) == 1
    err = capsys.readouterr().err
    assert "could not find any" in err
    assert len(err.strip().splitlines()) == 1


def test_encrypt_decrypt_cycle(home, cwd, write_config, monkeypatch, capsys):
    path = write_config("encrypted: false\nenvs:\n  dev:\n    A: secret1\n")
    feed(monkeypatch, secret="pw")

    assert main(["--encrypt"]) == 0
    assert "secret1" not in path.read_text()
    assert main(["--encrypt"]) == 0
    assert "Already encrypted" in capsys.readouterr().out

    assert main(["--list", "dev"]) == 0
    assert "A=secret1" in capsys.readouterr().out

    assert main(["--decrypt"]) == 0
    assert yaml.safe_load(path.read_text())["envs"]["dev"]["A"] == "secret1"
    assert main(["--decrypt"]) == 0
    assert "Already decrypted" in capsys.readouterr().out


def test_dry_run_substitutes(home, cwd, write_config, capsys):
    write_config("envs:\n  dev:\n    NAME: world\n")
    assert main(["--dry", "dev", "echo hello", "$NAME"]) == 0
    assert capsys.readouterr().out.strip() == "echo hello world"


def test_run_returns_child_exit_code(home, cwd, write_config):
    write_config("envs:\n  dev:\n    CODE: '4'\n")
    assert main(["dev", sys.executable, "-c", "import os, sys; sys.exit(int(os.environ['CODE']))"]) == 4


def test_non_utf8_config_is_reported(home, cwd, capsys):
    (cwd / GOGO_YAML).write_bytes(b"envs:\n  dev:\n    A: \xff\xfe\n")
    assert main(["--list", "dev"]) == 1
    assert "could not parse" in capsys.readouterr().err


def test_dry_run_with_quote_in_value(home, cwd, write_config, capsys):
    write_config('envs:\n  dev:\n    MSG: "it\'s"\n')
    assert main(["--dry", "dev", "echo $MSG"]) == 0
    assert "it" in capsys.readouterr().out


def test_unusable_variable_name_is_reported(home, cwd, write_config, capsys):
    write_config('envs:\n  dev:\n    "A=B": x\n')
    assert main(["dev", sys.executable, "-c", "pass"]) == 1
    assert "environment variable name" in capsys.readouterr().err
