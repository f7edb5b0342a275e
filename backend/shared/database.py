"""
Supabase client shared by the persistence gateway and file storage.

SupabaseGateway (tables) and SupabaseStorage (upload and content buckets)
wrap the same client. It uses the service role key, so row level security
does not apply: every permission decision is made by the authorization gate
before a service touches the store.
"""

from typing import Optional

from supabase import Client, create_client

from .config import get_settings

_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Return the process-wide Supabase client, creating it on first use.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset.
            Raised on first use rather than at import so the app can start
            and report itself unready.
    """
    global _client

    if _client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase is not configured. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY."
            )
        _client = create_client(settings.supabase_url, settings.supabase_service_role_key)

    return _client


def reset_client_cache() -> None:
    """Forget the cached client; the next gateway or storage call rebuilds it."""
    global _client
    _client = None
