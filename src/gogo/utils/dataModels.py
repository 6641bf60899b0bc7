from dataclasses import dataclass, field
from typing import Dict, Any

from gogo.utils.errors import ConfigParseError

GOGO_YAML = ".gogo.yaml"
GOGO_PASSWD = ".gogopasswd"

KEY_SIZE = 32  # AES-256
NONCE_SIZE = 12
TAG_SIZE = 16
PASSWORD_FILLER = "x"
MACHINE_APP_ID = "gogo"


@dataclass
class Configuration:
    encrypted: bool = False
    envs: Dict[str, Dict[str, str]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "encrypted": self.encrypted,
            "envs": {name: dict(variables) for name, variables in self.envs.items()},
        }

    @staticmethod
    def from_dict(obj: Any) -> "Configuration":
        """Validate a parsed YAML document and build a Configuration.

        ``envs`` and environment bodies may be null (an env created by
        ``--init`` has no variables yet). Scalar values are kept as strings.
        """
        if obj is None:
            obj = {}
        if not isinstance(obj, dict):
            raise ConfigParseError(f"{GOGO_YAML} must contain a mapping, got {type(obj).__name__}")

        encrypted = obj.get("encrypted", False)
        if encrypted is None:
            encrypted = False
        if not isinstance(encrypted, bool):
            raise ConfigParseError(f"'encrypted' must be true or false, got {encrypted!r}")

        raw_envs = obj.get("envs") or {}
        if not isinstance(raw_envs, dict):
            raise ConfigParseError("'envs' must be a mapping of environments")

        envs: Dict[str, Dict[str, str]] = {}
        for env_name, variables in raw_envs.items():
            if variables is None:
                variables = {}
            if not isinstance(variables, dict):
                raise ConfigParseError(f"environment '{env_name}' must be a mapping of variables")
            env: Dict[str, str] = {}
            for var_name, value in variables.items():
                if isinstance(value, (dict, list)):
                    raise ConfigParseError(f"variable '{env_name}.{var_name}' must be a scalar")
                env[str(var_name)] = "" if value is None else _scalar_to_str(value)
            envs[str(env_name)] = env

        return Configuration(encrypted=encrypted, envs=envs)


def _scalar_to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
