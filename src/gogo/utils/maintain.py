import argparse
import logging

from typing import Callable

from gogo.crypto.aead import encrypt_string, decrypt_string
from gogo.storage.config import ConfigStore
from gogo.storage.passwd import key_for, pad_password
from gogo.utils.dataModels import Configuration
from gogo.utils.errors import AlreadyEncrypted, AlreadyPlaintext
from gogo.utils.helper import ask_secret

logger = logging.getLogger(__name__)


def encrypt_config(config: Configuration, key: bytes) -> Configuration:
    envs = {
        name: {var: encrypt_string(value, key) for var, value in variables.items()}
        for name, variables in config.envs.items()
    }
    return Configuration(encrypted=True, envs=envs)


def decrypt_config(config: Configuration, key: bytes) -> Configuration:
    envs = {
        name: {var: decrypt_string(value, key) for var, value in variables.items()}
        for name, variables in config.envs.items()
    }
    return Configuration(encrypted=False, envs=envs)


def _password(store: ConfigStore, ask_password: Callable[[], str]) -> tuple[str, str | None]:
    """Return (padded password, raw password to persist or None if already stored)."""
    stored = store.keys.load_password()
    if stored is not None:
        return stored, None
    raw = ask_password()
    return pad_password(raw), raw


def encrypt_store(store: ConfigStore, ask_password: Callable[[], str]) -> Configuration:
    """Plaintext -> Encrypted.

    Every value is encrypted in memory first; the config file is written once,
    after a newly entered password has been stored.
    """
    config = store.load()
    if config.encrypted:
        raise AlreadyEncrypted("Already encrypted")

    password, new_raw = _password(store, ask_password)
    encrypted = encrypt_config(config, key_for(password))
    if new_raw is not None:
        store.keys.save_password(new_raw)
    store.save(encrypted)
    logger.info("encrypted %d environments", len(encrypted.envs))
    return encrypted


def decrypt_store(store: ConfigStore, ask_password: Callable[[], str]) -> Configuration:
    """Encrypted -> Plaintext.

    A wrong password fails on the first value, before the password store or
    the config file are written.
    """
    config = store.load()
    if not config.encrypted:
        raise AlreadyPlaintext("Already decrypted")

    password, new_raw = _password(store, ask_password)
    decrypted = decrypt_config(config, key_for(password))
    if new_raw is not None:
        store.keys.save_password(new_raw)
    store.save(decrypted)
    logger.info("decrypted %d environments", len(decrypted.envs))
    return decrypted


def cmd_encrypt(args: argparse.Namespace) -> int:
    encrypt_store(args.store, lambda: ask_secret("Enter password (max. 32): "))
    print("[+] Encryption done")
    return 0


def cmd_decrypt(args: argparse.Namespace) -> int:
    decrypt_store(args.store, lambda: ask_secret("Enter password: "))
    print("[+] Decryption done")
    return 0
