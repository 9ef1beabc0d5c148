"""
Supabase client holder.

The handle is built once when the application is created and held for
future persistence work. Construction fails fast: a misconfigured store
aborts startup instead of leaving callers with a null client.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from supabase import Client, ClientOptions, create_client

from quickex.config import Settings
from quickex.errors import StoreConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class SupabaseStore:
    """Owns the Supabase client for the lifetime of the process."""

    url: str
    anon_key: str
    _client: Client = field(init=False, repr=False)

    def __post_init__(self):
        if not self.url or not self.anon_key:
            raise StoreConfigurationError(
                "Set SUPABASE_URL and SUPABASE_ANON_KEY to enable persistence."
            )
        try:
            # No auth session is kept between requests.
            self._client = create_client(
                self.url,
                self.anon_key,
                options=ClientOptions(persist_session=False),
            )
        except Exception as exc:
            raise StoreConfigurationError(
                f"Could not create Supabase client for {self.url}: {exc}"
            ) from exc
        logger.info("Supabase client created for %s", self.url)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SupabaseStore":
        return cls(url=settings.supabase_url, anon_key=settings.supabase_anon_key)

    def get_client(self) -> Client:
        return self._client
