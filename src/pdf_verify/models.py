"""Data models for catalogue products and PDF probe results."""

from enum import Enum

from pydantic import BaseModel


class Product(BaseModel):
    """A catalogue product as read from the record store."""

    id: int | str
    name: str
    pdf_url: str | None = None

    @property
    def has_pdf_url(self) -> bool:
        return bool(self.pdf_url)


class ProbeStatus(str, Enum):
    no_url = "no_url"
    accessible = "accessible"
    failed = "failed"
    error = "error"


class ProbeResult(BaseModel):
    """Outcome of checking a single product's PDF."""

    product: Product
    status: ProbeStatus
    status_code: int | None = None
    error: str | None = None

    @property
    def is_problem(self) -> bool:
        """True for results reported on the error console."""
        return self.status in (ProbeStatus.failed, ProbeStatus.error)

    def line(self) -> str:
        """Render the human-readable status line for this result."""
        name = self.product.name
        url = self.product.pdf_url
        if self.status == ProbeStatus.no_url:
            return f"[ ] {name}: No PDF URL"
        if self.status == ProbeStatus.accessible:
            return f"[OK] {name}: PDF accessible ({url})"
        if self.status == ProbeStatus.failed:
            return f"[FAIL] {name}: PDF URL returned {self.status_code} ({url})"
        return f"[ERR] {name}: Failed to fetch PDF ({self.error})"
