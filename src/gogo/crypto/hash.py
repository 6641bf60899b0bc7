import logging

import machineid

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes, hmac

from gogo.utils.dataModels import KEY_SIZE, MACHINE_APP_ID
from gogo.utils.errors import HostIdentityError

logger = logging.getLogger(__name__)


def hmac_sha256_hex(key: bytes, data: bytes) -> str:
    h = hmac.HMAC(key, hashes.SHA256(), backend=default_backend())
    h.update(data)
    return h.finalize().hex()


def raw_machine_id() -> str:
    """Return the host's platform identifier (unhashed, never persisted)."""
    try:
        value = machineid.id()
    except Exception as e:  # py-machineid raises a bare Exception per platform
        raise HostIdentityError(f"could not read machine id: {e}") from e
    if not value:
        raise HostIdentityError("could not read machine id")
    return value


def machine_identifier(app_id: str = MACHINE_APP_ID) -> bytes:
    """32-byte wrapping key bound to this host.

    hex(HMAC-SHA256(key=machine id, msg=app id)) truncated to 32 characters,
    so the raw machine id is never exposed to the rest of the program.
    """
    protected = hmac_sha256_hex(raw_machine_id().encode("utf-8"), app_id.encode("utf-8"))
    logger.debug("derived machine identifier for app id %r", app_id)
    return protected[:KEY_SIZE].encode("ascii")
