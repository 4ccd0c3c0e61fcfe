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
"""Sequential reachability checks for product PDF documents."""

import logging
from collections.abc import Iterable, Iterator

import httpx
from rich.console import Console

from pdf_verify.config import Settings
from pdf_verify.models import ProbeResult, ProbeStatus, Product
from pdf_verify.store import RecordStore, RecordStoreError

logger = logging.getLogger(__name__)


def make_console(stderr: bool = False, **kwargs) -> Console:
    """Create a console that prints status lines verbatim."""
    return Console(
        stderr=stderr,
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
        **kwargs,
    )


class PdfChecker:
    """Probe product PDF URLs one at a time with HTTP HEAD requests."""

    def __init__(
        self,
        timeout: float | None = None,
        user_agent: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the checker with an HTTPX client."""
        headers = {"User-Agent": user_agent} if user_agent else {}
        self.client = httpx.Client(
            timeout=timeout,
            headers=headers,
            follow_redirects=True,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "PdfChecker":
        return cls(timeout=settings.probe_timeout, user_agent=settings.user_agent)

    def __enter__(self) -> "PdfChecker":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - close the client."""
        self.close()

    def close(self) -> None:
        """Close the httpx client."""
        self.client.close()

    def probe(self, product: Product) -> ProbeResult:
        """Check whether a product's PDF is reachable.

        Products without a URL are classified without touching the network.
        Otherwise exactly one HEAD request is made and its outcome is
        classified as accessible, failed (non-2xx status) or error (the
        request could not complete).

        Args:
            product: The product to check.

        Returns:
            The classification for this product.
        """
        if not product.has_pdf_url:
            return ProbeResult(product=product, status=ProbeStatus.no_url)

        try:
            response = self.client.head(product.pdf_url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            message = str(e) or type(e).__name__
            logger.debug("Probe of %s raised %r", product.pdf_url, e)
            return ProbeResult(product=product, status=ProbeStatus.error, error=message)

        logger.debug("HEAD %s -> %d", product.pdf_url, response.status_code)
        if response.is_success:
            status = ProbeStatus.accessible
        else:
            status = ProbeStatus.failed
        return ProbeResult(
            product=product, status=status, status_code=response.status_code
        )

    def check(self, products: Iterable[Product]) -> Iterator[ProbeResult]:
        """Probe each product in turn, yielding results in input order."""
        for product in products:
            yield self.probe(product)

    def run(
        self,
        store: RecordStore,
        console: Console,
        err_console: Console,
    ) -> list[ProbeResult] | None:
        """Fetch all products and print a status line for each.

        Args:
            store: Source of the product records.
            console: Receives the summary, no-URL and accessible lines.
            err_console: Receives failed and error lines.

        Returns:
            The probe results, or None if the products could not be fetched.
        """
        logger.info("Fetching products...")
        try:
            products = store.fetch_products()
        except RecordStoreError as e:
            logger.error("Error fetching products: %s", e)
            return None

        console.print(f"Found {len(products)} products.")

        results = []
        for result in self.check(products):
            target = err_console if result.is_problem else console
            target.print(result.line())
            results.append(result)
        return results
