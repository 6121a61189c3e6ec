import pytest

from naijatax.core.exceptions import NoResultToExportError
from naijatax.models.tax_models import TaxInput
from naijatax.services.pdf_service import PDFService
from naijatax.services.tax_engine import compute_tax_summary


@pytest.fixture
def freelancer_result(fixed_now):
    return compute_tax_summary(
        TaxInput(
            annual_income=5_000_000,
            taxpayer_category="freelancer",
            state_code="abuja",
            vat_taxable_amount=400_000,
            withholding_category="service",
        ),
        now=fixed_now,
    )


def test_summary_lines_in_print_order(freelancer_result):
    lines = PDFService("en").summary_lines(freelancer_result)
    assert lines == [
        "Date: 2025-01-15 09:30:00 UTC",
        "Taxpayer Type: Freelancer",
        "State: Abuja",
        "Annual Income: ₦5,000,000.00",
        "State Allowance: ₦150,000.00",
        "Annual Income Tax: ₦663,000.00",
        "Monthly PAYE Estimate: ₦55,250.00",
        "VAT (7.5%): ₦30,000.00",
        "Withholding Tax: ₦250,000.00",
        "Capital Gains Tax: ₦663,000.00",
        "Net Pay: ₦4,057,000.00",
    ]


def test_company_summary_has_no_net_pay(fixed_now):
    result = compute_tax_summary(
        TaxInput(annual_income=10_000_000, taxpayer_category="large_company"), now=fixed_now
    )
    lines = PDFService("en").summary_lines(result)
    assert len(lines) == 10
    assert not any(line.startswith("Net Pay") for line in lines)
    assert "Monthly PAYE Estimate: ₦283,333.33" in lines


def test_pidgin_labels(freelancer_result):
    lines = PDFService("pg").summary_lines(freelancer_result)
    assert lines[1] == "Wetin You dey Pay Tax For: Freelancer"
    assert "Total Tax for Year: ₦663,000.00" in lines
    assert lines[-1] == "Wetin You Go Take Home: ₦4,057,000.00"


def test_generate_pdf_bytes(freelancer_result):
    pdf = PDFService().generate_tax_summary_pdf(freelancer_result)
    assert isinstance(pdf, bytes)
    assert pdf.startswith(b"%PDF")
    assert len(pdf) > 500


def test_generate_pdf_without_result():
    with pytest.raises(NoResultToExportError) as exc_info:
        PDFService().generate_tax_summary_pdf(None)
    assert exc_info.value.code == "EXP400"
    assert exc_info.value.status_code == 404


def test_unknown_codes_printed_as_is(fixed_now):
    result = compute_tax_summary(
        TaxInput(annual_income=1_000, taxpayer_category="cooperative", state_code="ogun"), now=fixed_now
    )
    lines = PDFService("en").summary_lines(result)
    assert lines[1] == "Taxpayer Type: cooperative"
    assert lines[2] == "State: ogun"
