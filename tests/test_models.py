"""Tests for product and probe result models."""

import pytest

from pdf_verify.models import ProbeResult, ProbeStatus, Product


class TestProduct:
    """Test cases for Product."""

    @pytest.mark.parametrize("pdf_url", [None, ""])
    def test_missing_url(self, pdf_url):
        product = Product(id=1, name="Term Life", pdf_url=pdf_url)
        assert not product.has_pdf_url

    def test_url_present(self, health_plan):
        assert health_plan.has_pdf_url

    def test_opaque_id(self):
        """Ids may be integers or strings such as UUIDs."""
        product = Product.model_validate(
            {"id": "5f0c7a4e-1b2d-4c3e-9f00-000000000000", "name": "Motor"}
        )
        assert product.id == "5f0c7a4e-1b2d-4c3e-9f00-000000000000"
        assert product.pdf_url is None


class TestProbeResult:
    """Test cases for rendering probe results."""

    def test_no_url_line(self):
        result = ProbeResult(
            product=Product(id=1, name="Term Life", pdf_url=None),
            status=ProbeStatus.no_url,
        )
        assert result.line() == "[ ] Term Life: No PDF URL"
        assert not result.is_problem

    def test_accessible_line(self, health_plan):
        result = ProbeResult(
            product=health_plan, status=ProbeStatus.accessible, status_code=200
        )
        assert result.line() == "[OK] Health Plan: PDF accessible (https://host/doc.pdf)"
        assert not result.is_problem

    def test_failed_line(self, health_plan):
        result = ProbeResult(product=health_plan, status=ProbeStatus.failed, status_code=404)
        assert (
            result.line()
            == "[FAIL] Health Plan: PDF URL returned 404 (https://host/doc.pdf)"
        )
        assert result.is_problem

    def test_error_line(self, health_plan):
        result = ProbeResult(product=health_plan, status=ProbeStatus.error, error="timeout")
        assert result.line() == "[ERR] Health Plan: Failed to fetch PDF (timeout)"
        assert result.is_problem
