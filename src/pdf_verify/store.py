# ==============================================================================
#  Copyright 2025 Matthew Pounsett <matt@conundrum.com>
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
# ==============================================================================
"""Product record store backed by a hosted Supabase database."""

import logging

import httpx
from postgrest.exceptions import APIError
from pydantic import ValidationError
from supabase import Client, SupabaseException, create_client

from pdf_verify.config import Settings
from pdf_verify.models import Product

logger = logging.getLogger(__name__)

PRODUCT_COLUMNS = "id, name, pdf_url"


class RecordStoreError(Exception):
    """Raised when the product records cannot be fetched."""


def mask_key(key: str) -> str:
    """Return an API key safe to include in log output."""
    if len(key) <= 8:
        return "***"
    return f"{key[:6]}***"


class RecordStore:
    """Read-only access to the product catalogue."""

    def __init__(self, client: Client, table: str = "products") -> None:
        self.client = client
        self.table = table

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecordStore":
        """Create a store using the credentials in settings."""
        logger.debug(
            "Connecting to %s with key %s",
            settings.supabase_url,
            mask_key(settings.supabase_key),
        )
        try:
            client = create_client(settings.supabase_url, settings.supabase_key)
        except SupabaseException as e:
            raise RecordStoreError(f"Could not create Supabase client: {e}") from e
        return cls(client, table=settings.products_table)

    def fetch_products(self) -> list[Product]:
        """Fetch every product record in a single query.

        Returns:
            Products in the order the store returned them.

        Raises:
            RecordStoreError: If the query fails or returns malformed rows.
        """
        try:
            response = self.client.table(self.table).select(PRODUCT_COLUMNS).execute()
        except APIError as e:
            raise RecordStoreError(f"Query on '{self.table}' failed: {e.message}") from e
        except httpx.HTTPError as e:
            raise RecordStoreError(f"Request to record store failed: {e}") from e

        rows = response.data or []
        logger.debug("Record store returned %d rows", len(rows))

        try:
            return [Product.model_validate(row) for row in rows]
        except ValidationError as e:
            raise RecordStoreError(f"Malformed product record: {e}") from e
