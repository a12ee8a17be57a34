# marketplace/user/security.py
# Stored values passlib does not recognise as a hash are compared as plaintext.

import hmac

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)


def is_hashed(stored: str) -> bool:
    return pwd_context.identify(stored, required=False) is not None


def verify_password(plain: str, stored: str | None) -> bool:
    if not plain or not stored:
        return False
    if is_hashed(stored):
        return pwd_context.verify(plain, stored)
    return hmac.compare_digest(plain.encode("utf-8"), stored.encode("utf-8"))
