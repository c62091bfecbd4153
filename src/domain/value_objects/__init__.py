"""Domain value objects."""

from src.domain.value_objects.token_claims import IssuedToken, TokenClaims

__all__ = ["IssuedToken", "TokenClaims"]
