import logging

import yaml

from pathlib import Path
from typing import Dict

from gogo.crypto.aead import encrypt_string, decrypt_string
from gogo.storage.passwd import KeyMaterialProvider
from gogo.storage.vault import save_atomic
from gogo.utils.dataModels import Configuration, GOGO_YAML
from gogo.utils.errors import (
    ConfigAlreadyExists,
    ConfigNotFound,
    ConfigParseError,
    MissingEnvironment,
    PasswordNotConfigured,
)
from gogo.utils.helper import gogo_paths

logger = logging.getLogger(__name__)


class ConfigStore:
    """The ``.gogo.yaml`` file: environments of variables, optionally encrypted.

    The file in ``cwd`` takes precedence over the one in ``home``. Saves are
    atomic but unlocked; two concurrent invocations are last-writer-wins.
    """

    def __init__(self, cwd: Path, home: Path, keys: KeyMaterialProvider):
        self.cwd = Path(cwd)
        self.home = Path(home)
        self.keys = keys
        self._paths = gogo_paths(self.cwd, self.home)

    @staticmethod
    def _dump(config: Configuration) -> str:
        return yaml.safe_dump(config.to_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True)

    def locate(self) -> Path:
        for candidate in (self._paths["local"], self._paths["home"]):
            if candidate.is_file():
                return candidate
        raise ConfigNotFound(f"could not find any {GOGO_YAML} in {self.cwd} or {self.home}")

    def load(self) -> Configuration:
        path = self.locate()
        try:
            obj = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigParseError(f"could not parse {path}: {e}") from e
        config = Configuration.from_dict(obj)
        logger.debug("loaded %s (encrypted=%s, %d envs)", path, config.encrypted, len(config.envs))
        return config

    def save(self, config: Configuration) -> Path:
        path = self.locate()
        save_atomic(path, self._dump(config))
        return path

    def init(self, environment: str) -> Path:
        if not environment:
            raise MissingEnvironment("Environment required")
        path = self._paths["local"]
        if path.exists():
            raise ConfigAlreadyExists(f"{path} already exists")
        bootstrap = Configuration(encrypted=False, envs={environment: {}})
        save_atomic(path, self._dump(bootstrap))
        return path

    def require_key(self) -> bytes:
        key = self.keys.load_key()
        if key is None:
            raise PasswordNotConfigured(
                f"{GOGO_YAML} is encrypted but no password is stored in {self.keys.password_path}"
            )
        return key

    def get_environment(self, name: str) -> Dict[str, str]:
        if not name:
            raise MissingEnvironment("Environment required")
        config = self.load()
        variables = dict(config.envs.get(name, {}))
        if config.encrypted and variables:
            key = self.require_key()
            variables = {var: decrypt_string(value, key) for var, value in variables.items()}
        return variables

    def add_variable(self, environment: str, key: str, value: str) -> Configuration:
        if not environment:
            raise MissingEnvironment("Environment required")
        config = self.load()
        env = config.envs.setdefault(environment, {})
        env[key] = encrypt_string(value, self.require_key()) if config.encrypted else value
        self.save(config)
        return config
