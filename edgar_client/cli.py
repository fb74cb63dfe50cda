"""Command-line interface for the EDGAR client."""

import argparse
import json
import logging
import sys
from datetime import date

from pydantic import ValidationError

from edgar_client.aggregator import filter_filings
from edgar_client.client import EdgarClient
from edgar_client.companies import lookup_company
from edgar_client.errors import EdgarError, EmptyStatisticsError
from edgar_client.frame_stats import statistics, top_companies
from edgar_client.models import FilingFilter
from edgar_client.normalizer import facts_for_form
from edgar_client.params import parse_period, parse_unit


def format_filing_table(filings: list) -> str:
    """Format filings as a simple table."""
    if not filings:
        return "No filings found."

    lines = []
    lines.append(f"{'Form':<10} {'Date':<12} {'Accession Number':<30}")
    lines.append("-" * 60)

    for filing in filings:
        lines.append(
            f"{filing.form:<10} {str(filing.filing_date):<12} {filing.accession_number or '':<30}"
        )

    return "\n".join(lines)


def format_frame_table(entries: list) -> str:
    """Format ranked frame entries as a simple table."""
    if not entries:
        return "No entries found."

    lines = []
    lines.append(f"{'CIK':<12} {'Entity':<40} {'Value':>20}")
    lines.append("-" * 74)

    for entry in entries:
        lines.append(f"{entry.cik:<12} {entry.entity_name[:40]:<40} {entry.val:>20,.2f}")

    return "\n".join(lines)


def _parse_date(value: str | None, flag: str) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        print(f"Error: Invalid date format for {flag}: {value}", file=sys.stderr)
        print("Expected format: YYYY-MM-DD", file=sys.stderr)
        sys.exit(1)


def cmd_filings(client: EdgarClient, args: argparse.Namespace) -> None:
    date_from = _parse_date(args.date_from, "--date-from")
    date_to = _parse_date(args.date_to, "--date-to")

    try:
        filters = FilingFilter(form_types=args.form_types, date_from=date_from, date_to=date_to, limit=args.limit)
    except ValidationError as e:
        print(f"Error: Invalid filter: {e.errors()[0]['msg']}", file=sys.stderr)
        sys.exit(1)

    try:
        company = lookup_company(client.company_tickers(), args.ticker)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.all:
        filings = client.all_filings(company.cik)
    else:
        filings = list(client.submissions(company.cik).recent)
    filings = filter_filings(filings, filters)

    if args.json:
        output = {
            "company": company.model_dump(),
            "filings": [f.model_dump(mode="json") for f in filings],
        }
        print(json.dumps(output, indent=2))
    else:
        print(f"\nCompany: {company.name} ({company.ticker})")
        print(f"CIK: {company.cik}\n")
        print(format_filing_table(filings))


def cmd_facts(client: EdgarClient, args: argparse.Namespace) -> None:
    facts = client.company_facts(args.cik)
    matches = facts_for_form(facts, args.form)[:args.limit]

    if args.json:
        output = [
            {"taxonomy": taxonomy, "tag": tag, **value.model_dump(mode="json")}
            for taxonomy, tag, value in matches
        ]
        print(json.dumps(output, indent=2))
        return

    print(f"\n{facts.entity_name} (CIK {facts.cik}), form {args.form}\n")
    if not matches:
        print("No facts found.")
    for taxonomy, tag, value in matches:
        print(f"{taxonomy}:{tag:<60} {str(value.end):<12} {value.val:>20,.2f}")


def cmd_frame(client: EdgarClient, args: argparse.Namespace) -> None:
    try:
        period = parse_period(args.period)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    frame = client.frames(args.taxonomy, args.tag, parse_unit(args.unit), period)
    try:
        ranked = top_companies(frame.data, args.top, ascending=args.ascending)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    try:
        stats = statistics(frame.data)
    except EmptyStatisticsError:
        stats = None

    if args.json:
        output = {
            "frame": {"taxonomy": frame.taxonomy, "tag": frame.tag, "period": frame.ccp, "unit": frame.uom},
            "statistics": stats.model_dump() if stats else None,
            "top": [e.model_dump(mode="json") for e in ranked],
        }
        print(json.dumps(output, indent=2))
        return

    print(f"\n{frame.label or frame.tag} ({frame.ccp}, {frame.uom})\n")
    if stats is None:
        print("Frame is empty.")
        return
    print(f"Count: {stats.count}  Sum: {stats.sum:,.2f}  Mean: {stats.mean:,.2f}")
    print(f"Min: {stats.min:,.2f}  Median: {stats.median:,.2f}  Max: {stats.max:,.2f}\n")
    print(format_frame_table(ranked))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query SEC EDGAR filings and XBRL financial data"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    filings = subparsers.add_parser("filings", help="List a company's filings by ticker")
    filings.add_argument(
        "ticker",
        help="Stock ticker symbol (e.g., AAPL, MSFT)"
    )
    filings.add_argument(
        "--form",
        dest="form_types",
        action="append",
        help="Filter by form type (e.g., 10-K, 10-Q). Can be specified multiple times."
    )
    filings.add_argument(
        "--date-from",
        type=str,
        help="Filter filings from this date (YYYY-MM-DD)"
    )
    filings.add_argument(
        "--date-to",
        type=str,
        help="Filter filings to this date (YYYY-MM-DD)"
    )
    filings.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Maximum number of results (default: 10)"
    )
    filings.add_argument(
        "--all",
        action="store_true",
        help="Include older filings from the continuation files"
    )
    filings.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON"
    )
    filings.set_defaults(handler=cmd_filings)

    facts = subparsers.add_parser("facts", help="List XBRL facts reported on a form type")
    facts.add_argument("cik", help="Company CIK")
    facts.add_argument(
        "--form",
        default="10-K",
        help="Form type to match exactly (default: 10-K)"
    )
    facts.add_argument(
        "--limit",
        type=int,
        default=25,
        help="Maximum number of results (default: 25)"
    )
    facts.add_argument("--json", action="store_true", help="Output results as JSON")
    facts.set_defaults(handler=cmd_facts)

    frame = subparsers.add_parser("frame", help="Rank companies within an XBRL frame")
    frame.add_argument("taxonomy", help="Taxonomy (e.g., us-gaap)")
    frame.add_argument("tag", help="Concept tag (e.g., Revenues)")
    frame.add_argument("unit", help="Unit (e.g., USD, USD-per-shares)")
    frame.add_argument("period", help="Period code (e.g., CY2023, CY2024Q1, CY2024Q1I)")
    frame.add_argument(
        "--top",
        type=int,
        default=10,
        help="Number of companies to show (default: 10)"
    )
    frame.add_argument(
        "--ascending",
        action="store_true",
        help="Rank smallest values first"
    )
    frame.add_argument("--json", action="store_true", help="Output results as JSON")
    frame.set_defaults(handler=cmd_frame)

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    Main CLI entry point.

    Usage: edgar-client filings AAPL --form 10-K --limit 5
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        with EdgarClient() as client:
            args.handler(client, args)
    except EdgarError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
