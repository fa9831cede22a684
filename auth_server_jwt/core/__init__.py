"""
Core module - Service facade, configuration and errors
"""

from .config import ServiceConfig
from .oauth_service import OAuthService

__all__ = [
    "ServiceConfig",
    "OAuthService",
]
