"""Demo credential verifier — one shared password for every account.

Illustrative only: there is no hashing and no per-user secret.
"""

import hmac

from storefront.application.interfaces import CredentialVerifier
from storefront.domain.entities import User


class StaticPasswordVerifier(CredentialVerifier):
    def __init__(self, password: str):
        self._password = password

    def verify(self, user: User, password: str) -> bool:
        return hmac.compare_digest(password.encode(), self._password.encode())
