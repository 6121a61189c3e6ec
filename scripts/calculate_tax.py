#!/usr/bin/env python3
"""
Compute one Nigerian tax summary from the command line.

Usage:
    python scripts/calculate_tax.py --income 5000000 --type individual --state lagos
    python scripts/calculate_tax.py --income 10000000 --type large_company --pdf summary.pdf
    python scripts/calculate_tax.py --income 2500000 --vat 400000 --wht service --lang pg --csv history.csv
"""
import argparse
import sys
from pathlib import Path

from naijatax.core.exceptions import NaijaTaxException
from naijatax.core.logger import init_logging
from naijatax.services.csv_export import generate_history_csv
from naijatax.services.history import SessionStore, set_language
from naijatax.services.localization import format_naira, translate
from naijatax.services.pdf_service import PDFService


def print_summary(result, language: str) -> None:
    t = lambda key: translate(key, language)  # noqa: E731
    print("\n" + "=" * 60)
    print(t("title"))
    print("=" * 60)
    print(f"{t('taxpayer_type')}: {result.taxpayer_category}")
    print(f"{t('select_state')}: {result.state_code}")
    print(f"{t('annual_tax')}: {format_naira(result.annual_tax)}")
    print(f"{t('monthly_pay')}: {format_naira(result.monthly_tax)}")
    print(f"{t('vat_amount')}: {format_naira(result.vat)}")
    print(f"{t('wht_amount')}: {format_naira(result.withholding_tax)}")
    print(f"{t('cgt_amount')}: {format_naira(result.capital_gains_tax)}")
    if result.has_net_pay:
        print(f"{t('net_pay')}: {format_naira(result.net_pay)}")
    print(f"Calculated at: {result.computed_at:%Y-%m-%d %H:%M:%S %Z}")
    print("-" * 60)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Nigeria tax calculator")
    parser.add_argument("--income", required=True, help="Annual income / profit in Naira")
    parser.add_argument(
        "--type",
        dest="category",
        default="individual",
        choices=["individual", "freelancer", "small_company", "large_company"],
    )
    parser.add_argument("--state", default="default", help="lagos, abuja, kano or default")
    parser.add_argument("--vat", default=None, help="VAT taxable amount in Naira")
    parser.add_argument("--wht", default="dividend", help="dividend, interest, rent or service")
    parser.add_argument("--lang", default=None, choices=["en", "pg"])
    parser.add_argument("--csv", type=Path, default=None, help="Write history CSV to this path")
    parser.add_argument("--pdf", type=Path, default=None, help="Write summary PDF to this path")
    args = parser.parse_args(argv)

    init_logging()
    store = SessionStore()
    try:
        if args.lang:
            store.apply(set_language, args.lang)
        language = store.state.language
        result = store.calculate(
            args.income,
            taxpayer_category=args.category,
            state_code=args.state,
            vat_amount=args.vat,
            withholding_category=args.wht,
        )
    except NaijaTaxException as exc:
        message = translate(exc.message_key, store.state.language) if exc.message_key else exc.message
        print(f"❌ {message} [{exc.code}]", file=sys.stderr)
        return 2

    print_summary(result, language)

    if args.csv:
        args.csv.write_bytes(generate_history_csv(store.state.history))
        print(f"✅ CSV written to {args.csv}")
    if args.pdf:
        args.pdf.write_bytes(PDFService(language).generate_tax_summary_pdf(result))
        print(f"✅ PDF written to {args.pdf}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
