# core/signatures.py
import json
import logging
from solders.pubkey import Pubkey
from solders.signature import Signature
from config.settings import settings
from util.enums import ErrorMessage
from util.errors import VestingError
from util.functions import short_key

logger = logging.getLogger(__name__)


def signing_message(op: str, **fields) -> bytes:
    """
    Canonical bytes a caller signs for one operation:
    compact, key-sorted JSON of {"op", "programId", **fields}.
    """
    body = {"op": op, "programId": settings.PROGRAM_ID, **fields}
    return json.dumps(body, sort_keys=True, separators=(",", ":")).encode("utf-8")


def verify_signer(signer: str, signature: str, message: bytes) -> Pubkey:
    """
    Return the signer's key when `signature` is its Ed25519 signature over
    `message`; raise Unauthorized otherwise.
    """
    try:
        pubkey = Pubkey.from_string(signer)
        sig = Signature.from_string(signature)
    except Exception:
        logger.warning("signature.malformed signer=%s", short_key(signer))
        raise VestingError(ErrorMessage.UNAUTHORIZED, "Malformed signer or signature")

    if not sig.verify(pubkey, message):
        logger.warning("signature.invalid signer=%s", short_key(signer))
        raise VestingError(ErrorMessage.UNAUTHORIZED, "Invalid signature")
    return pubkey
