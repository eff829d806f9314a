"""Token signers."""

from src.infrastructure.signing.jwt_signer import JWTSigner

__all__ = ["JWTSigner"]
