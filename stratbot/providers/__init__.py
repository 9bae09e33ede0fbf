"""Data providers."""
from .worldbank import WorldBankApiClient

__all__ = ["WorldBankApiClient"]
