"""Supabase client singleton.

The ``profiles`` table is only reached through this client.  ``get_supabase()``
lazily creates one process-wide client from ``settings``.
"""

import logging

from supabase import Client, create_client

from app.core.config import settings

logger = logging.getLogger(__name__)

_client: Client | None = None


def get_supabase() -> Client:
    """Return the singleton Supabase client, creating it on first call."""
    global _client
    if _client is None:
        _client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
        logger.info("supabase_client_created", extra={"url": settings.SUPABASE_URL})
    return _client


def reset_supabase() -> None:
    """Drop the cached client so the next call builds a fresh one."""
    global _client
    _client = None
