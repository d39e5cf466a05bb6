"""
Shared infrastructure for the Aimo Pulse backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory and storage backend selection
- kv_store: Key-value store interface and implementations
- clock: Injectable time source and ID generation
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .clock import Clock, generate_id, utc_now
from .database import create_kv_store, get_supabase_client, reset_client_cache
from .exceptions import (
    PulseError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
)
from .kv_store import IKeyValueStore, InMemoryKeyValueStore, SupabaseKeyValueStore
from .models import CamelModel, SuccessResponse

__all__ = [
    "Settings",
    "get_settings",
    "Clock",
    "generate_id",
    "utc_now",
    "create_kv_store",
    "get_supabase_client",
    "reset_client_cache",
    "PulseError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "IKeyValueStore",
    "InMemoryKeyValueStore",
    "SupabaseKeyValueStore",
    "CamelModel",
    "SuccessResponse",
]
