import logging

from pathlib import Path
from typing import Callable

from gogo.crypto.aead import encrypt_string, decrypt_string
from gogo.crypto.hash import machine_identifier
from gogo.storage.vault import create_once
from gogo.utils.dataModels import KEY_SIZE, PASSWORD_FILLER
from gogo.utils.errors import AuthenticationFailure, ConfigurationError, CorruptPasswordStore
from gogo.utils.helper import rpad

logger = logging.getLogger(__name__)


def pad_password(raw: str) -> str:
    padded = rpad(raw, PASSWORD_FILLER, KEY_SIZE)
    if len(padded.encode("utf-8")) != KEY_SIZE:
        raise ConfigurationError("password must contain only ASCII characters")
    return padded


def key_for(password: str) -> bytes:
    """Key for configuration values from a stored (already padded) password."""
    return password.encode("utf-8")


class KeyMaterialProvider:
    """Stores the user's password wrapped under the machine identifier.

    The password file is created once and never overwritten, so an existing
    password can't be silently replaced.
    """

    def __init__(self, password_path: Path, machine_id: Callable[[], bytes] | None = None):
        self.password_path = Path(password_path)
        self._machine_id = machine_id or machine_identifier

    def load_password(self) -> str | None:
        if not self.password_path.exists():
            return None
        try:
            blob = self.password_path.read_bytes().decode("utf-8")
            return decrypt_string(blob, self._machine_id())
        except (AuthenticationFailure, UnicodeDecodeError) as e:
            raise CorruptPasswordStore(
                f"{self.password_path} can't be decrypted on this machine (host changed or file corrupted)"
            ) from e

    def save_password(self, raw: str) -> bool:
        padded = pad_password(raw)
        if self.password_path.exists():
            logger.warning("%s already exists, keeping it", self.password_path)
            return False
        blob = encrypt_string(padded, self._machine_id())
        created = create_once(self.password_path, blob)
        if not created:
            logger.warning("%s already exists, keeping it", self.password_path)
        return created

    def load_key(self) -> bytes | None:
        password = self.load_password()
        return None if password is None else key_for(password)
