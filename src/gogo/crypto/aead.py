import logging
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from gogo.utils.dataModels import KEY_SIZE, NONCE_SIZE, TAG_SIZE
from gogo.utils.errors import AuthenticationFailure, ConfigurationError

logger = logging.getLogger(__name__)


def get_aesgcm(key: bytes) -> AESGCM:
    if len(key) != KEY_SIZE:
        raise ConfigurationError(f"encryption key must be {KEY_SIZE} bytes, got {len(key)}")
    return AESGCM(key)


def encrypt_string(plaintext: str, key: bytes) -> str:
    """Seal ``plaintext`` and return hex(nonce || ciphertext || tag)."""
    aesgcm = get_aesgcm(key)
    nonce = os.urandom(NONCE_SIZE)
    ct = aesgcm.encrypt(nonce, plaintext.encode("utf-8"), None)
    return (nonce + ct).hex()


def decrypt_string(blob: str, key: bytes) -> str:
    aesgcm = get_aesgcm(key)
    try:
        enc = bytes.fromhex(blob.strip())
    except (ValueError, AttributeError) as e:
        raise AuthenticationFailure("value is not a valid encrypted blob") from e
    if len(enc) < NONCE_SIZE + TAG_SIZE:
        raise AuthenticationFailure("encrypted value is truncated")

    nonce, ct = enc[:NONCE_SIZE], enc[NONCE_SIZE:]
    try:
        plaintext = aesgcm.decrypt(nonce, ct, None)
    except InvalidTag as e:
        logger.debug("GCM tag verification failed for a %d byte blob", len(enc))
        raise AuthenticationFailure("could not decrypt value: wrong password or tampered data") from e
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as e:
        raise AuthenticationFailure("decrypted value is not valid UTF-8") from e
