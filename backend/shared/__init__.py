"""
Shared infrastructure for Serpleno backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- gateway: Persistence gateway interface and Supabase implementation
- storage: File storage passthrough
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    SerplenoError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
)
from .gateway import IPersistenceGateway, SupabaseGateway, PersistenceError, DuplicateKeyError
from .models import AuthenticatedUser, Plan, Role

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "SerplenoError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "ExternalServiceError",
    "IPersistenceGateway",
    "SupabaseGateway",
    "PersistenceError",
    "DuplicateKeyError",
    "AuthenticatedUser",
    "Plan",
    "Role",
]
