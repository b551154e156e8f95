"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services into routes.
"""

from src.domain.service import GcdService

# Module-level singleton - GcdService is stateless
_gcd_service = GcdService()


def get_gcd_service() -> GcdService:
    """Get GCD domain service (singleton)."""
    return _gcd_service
