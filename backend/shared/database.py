"""
Database client factory for Supabase.

Provides the service-role client used by the key-value store, and a
factory that picks the configured storage backend.
"""

from typing import Optional
from supabase import create_client, Client

from .config import get_settings
from .kv_store import IKeyValueStore, InMemoryKeyValueStore, SupabaseKeyValueStore

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    The key-value table is only ever touched by the backend, so the
    service role is the only client the application needs.

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def create_kv_store() -> IKeyValueStore:
    """
    Build the key-value store selected by STORAGE_BACKEND.

    Returns:
        InMemoryKeyValueStore for "memory", SupabaseKeyValueStore for "supabase"
    """
    settings = get_settings()
    if settings.storage_backend == "supabase":
        return SupabaseKeyValueStore(get_supabase_client(), settings.kv_table_name)
    return InMemoryKeyValueStore()


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
