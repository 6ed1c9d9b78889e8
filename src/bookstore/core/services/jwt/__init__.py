"""JWT service package."""

from .jwt_gen import JwtGeneratorService, validate_signing_key
from .jwt_verify import JwtVerificationService

__all__ = ["JwtGeneratorService", "JwtVerificationService", "validate_signing_key"]
