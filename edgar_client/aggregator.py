"""Assemble a company's complete filing history from paginated responses."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable

from edgar_client.errors import AggregationError, EdgarError
from edgar_client.models import Filing, FilingFilter, RecentFilingsPage, SubmissionData

log = logging.getLogger(__name__)

FetchPage = Callable[[str], RecentFilingsPage]
AsyncFetchPage = Callable[[str], Awaitable[RecentFilingsPage]]


def merge_all_filings(primary: SubmissionData, fetch_continuation: FetchPage) -> list[Filing]:
    """
    Merge the recent filings with every continuation page.

    The result is primary.recent followed by each continuation page's
    filings in the order the pages are listed. Pages are appended, not
    interleaved by date, and nothing is deduplicated.

    Args:
        primary: Submissions document for the company
        fetch_continuation: Callable returning the page stored under a filename

    Returns:
        The complete filing history

    Raises:
        AggregationError: If any continuation page cannot be fetched or decoded
    """
    filings = list(primary.recent)

    for filename in primary.continuation_files:
        log.debug("Fetching continuation file %s for CIK %s", filename, primary.cik)
        try:
            page = fetch_continuation(filename)
        except EdgarError as e:
            log.error("Continuation file %s for CIK %s failed: %s", filename, primary.cik, e)
            raise AggregationError(filename, e) from e
        filings.extend(page.filings)

    log.debug("Merged %d filings for CIK %s", len(filings), primary.cik)
    return filings


async def merge_all_filings_async(
    primary: SubmissionData, fetch_continuation: AsyncFetchPage
) -> list[Filing]:
    """
    Concurrent variant of merge_all_filings.

    All continuation pages are fetched at once; results are reassembled in
    the listed filename order regardless of completion order. If one fetch
    fails the remaining fetches are cancelled and AggregationError is raised.
    Cancelling the caller cancels every outstanding fetch.
    """
    filenames = primary.continuation_files
    if not filenames:
        return list(primary.recent)

    async def _fetch(filename: str) -> RecentFilingsPage:
        log.debug("Fetching continuation file %s for CIK %s", filename, primary.cik)
        try:
            return await fetch_continuation(filename)
        except EdgarError as e:
            log.error("Continuation file %s for CIK %s failed: %s", filename, primary.cik, e)
            raise AggregationError(filename, e) from e

    tasks = [asyncio.ensure_future(_fetch(name)) for name in filenames]
    try:
        pages = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    filings = list(primary.recent)
    for page in pages:
        filings.extend(page.filings)

    log.debug("Merged %d filings for CIK %s", len(filings), primary.cik)
    return filings


def filter_filings(filings: Iterable[Filing], filters: FilingFilter) -> list[Filing]:
    """
    Apply form type, date range and limit filters.

    Input order is preserved; the limit keeps the first matching filings.
    """
    result = list(filings)

    # Apply form_type filter
    if filters.form_types:
        result = [f for f in result if f.form in filters.form_types]

    # Apply date range filter
    if filters.date_from is not None:
        result = [f for f in result if f.filing_date >= filters.date_from]

    if filters.date_to is not None:
        result = [f for f in result if f.filing_date <= filters.date_to]

    if filters.limit is not None:
        result = result[:filters.limit]

    return result
