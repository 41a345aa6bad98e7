# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import hashlib
import hmac
import secrets

from app.infra.config import settings

_ALGORITHM = "pbkdf2_sha256"


def hash_password(password: str, *, iterations: int = 0) -> str:
    rounds = iterations or int(settings.PASSWORD_HASH_ITERATIONS)
    salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), rounds)
    return f"{_ALGORITHM}${rounds}${salt}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    try:
        algorithm, rounds, salt, expected = encoded.split("$", 3)
    except ValueError:
        return False
    if algorithm != _ALGORITHM:
        return False
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), int(rounds))
    return hmac.compare_digest(digest.hex(), expected)
