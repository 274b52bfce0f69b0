from .credential import USER_ID_MAX_LEN, Credential
from .signer import build_token, canonical_string, new_nonce, sign

__all__ = [
    "USER_ID_MAX_LEN",
    "Credential",
    "build_token",
    "canonical_string",
    "new_nonce",
    "sign",
]
