"""Company lookup against the SEC ticker directory."""

from edgar_client.cik import format_cik
from edgar_client.models import Company, CompanyTickerDirectory


def lookup_company(directory: CompanyTickerDirectory, ticker: str) -> Company:
    """
    Find company by ticker, raise ValueError if not found.

    Args:
        directory: Ticker directory as returned by the API
        ticker: Stock ticker symbol (case-insensitive)

    Returns:
        Company object with zero-padded CIK

    Raises:
        ValueError: If ticker is not found or is empty
    """
    if not ticker or not ticker.strip():
        raise ValueError("Ticker cannot be empty")

    ticker_upper = ticker.upper().strip()
    for entry in directory.entries:
        if entry.ticker.upper() == ticker_upper:
            return Company(
                ticker=ticker_upper,
                cik=entry.cik,
                name=entry.name,
                exchange=entry.exchange,
            )

    raise ValueError(f"Company with ticker '{ticker}' not found")


def tickers_for_cik(directory: CompanyTickerDirectory, cik: str | int) -> list[str]:
    """Return every ticker listed for a CIK, in directory order."""
    normalized = format_cik(cik)
    return [entry.ticker for entry in directory.entries if entry.cik == normalized]
