"""CIK normalization helpers."""

from edgar_client.errors import InvalidCikError

CIK_LENGTH = 10


def format_cik(cik: str | int) -> str:
    """
    Normalize a CIK to the 10-digit, zero-padded form used by EDGAR.

    Non-digit characters are dropped, so "320193", "0000320193" and
    "CIK320193" all normalize to "0000320193".

    Raises:
        InvalidCikError: If no digits remain or more than 10 digits remain
    """
    raw = str(cik)
    digits = "".join(ch for ch in raw if ch.isdigit())

    if not digits:
        raise InvalidCikError(raw, "must contain at least one digit")
    if len(digits.lstrip("0")) > CIK_LENGTH:
        raise InvalidCikError(raw, f"cannot be longer than {CIK_LENGTH} digits")

    return digits.lstrip("0").zfill(CIK_LENGTH)


def is_valid_cik(cik: str | int) -> bool:
    """Return True if the CIK can be normalized."""
    try:
        format_cik(cik)
    except InvalidCikError:
        return False
    return True
