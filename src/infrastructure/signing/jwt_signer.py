"""JWT signer - HMAC-signed tokens via PyJWT."""

from collections.abc import Mapping

import jwt

from src.domain.ports.config import SigningAlgorithm


class JWTSigner:
    """Signs wizard payloads as JWTs."""

    def __init__(self, algorithm: SigningAlgorithm = "HS256") -> None:
        self.algorithm = algorithm

    def sign(self, payload: Mapping[str, str], secret: bytes) -> str:
        """Encode payload as a JWT signed with secret."""
        return jwt.encode(dict(payload), secret, algorithm=self.algorithm)
