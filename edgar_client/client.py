"""HTTP transport and endpoint decoding for the SEC EDGAR API."""

import logging
import zipfile
from pathlib import Path

import httpx

from edgar_client.aggregator import merge_all_filings, merge_all_filings_async
from edgar_client.cik import format_cik
from edgar_client.config import EdgarSettings
from edgar_client.errors import TransportError
from edgar_client.models import (
    CompanyConcept,
    CompanyFacts,
    CompanyTickerDirectory,
    Filing,
    Frame,
    MutualFundTickerDirectory,
    RecentFilingsPage,
    SubmissionData,
    decode_response,
)
from edgar_client.params import Period, Taxonomy, Unit

log = logging.getLogger(__name__)

DATA_BASE = "https://data.sec.gov"
SEC_BASE = "https://www.sec.gov"

BULK_ARCHIVES = {
    "submissions": f"{SEC_BASE}/Archives/edgar/daily-index/bulkdata/submissions.zip",
    "companyfacts": f"{SEC_BASE}/Archives/edgar/daily-index/xbrl/companyfacts.zip",
}


def submissions_url(cik: str | int) -> str:
    return f"{DATA_BASE}/submissions/CIK{format_cik(cik)}.json"


def submissions_file_url(filename: str) -> str:
    return f"{DATA_BASE}/submissions/{filename}"


def company_concept_url(cik: str | int, taxonomy: Taxonomy | str, tag: str) -> str:
    return f"{DATA_BASE}/api/xbrl/companyconcept/CIK{format_cik(cik)}/{taxonomy}/{tag}.json"


def company_facts_url(cik: str | int) -> str:
    return f"{DATA_BASE}/api/xbrl/companyfacts/CIK{format_cik(cik)}.json"


def frames_url(taxonomy: Taxonomy | str, tag: str, unit: Unit | str, period: Period | str) -> str:
    # Period and Unit variants render as their path tokens, e.g. CY2024Q1I, USD-per-shares
    return f"{DATA_BASE}/api/xbrl/frames/{taxonomy}/{tag}/{unit}/{period}.json"


COMPANY_TICKERS_URL = f"{SEC_BASE}/files/company_tickers_exchange.json"
COMPANY_TICKERS_MF_URL = f"{SEC_BASE}/files/company_tickers_mf.json"


def _headers(settings: EdgarSettings) -> dict[str, str]:
    # SEC requires a User-Agent header
    return {
        "User-Agent": settings.user_agent,
        "Accept-Encoding": "gzip, deflate",
    }


def _transport_error(url: str, exc: httpx.HTTPError) -> TransportError:
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        log.error("Request to %s failed with status %s", url, status)
        return TransportError(status, f"Request to {url} failed with status {status}")
    log.error("Request to %s failed: %s", url, exc)
    return TransportError(None, f"Request to {url} failed: {exc}")


class EdgarClient:
    """Blocking client for the EDGAR submissions and XBRL endpoints."""

    def __init__(self, settings: EdgarSettings | None = None, *, http: httpx.Client | None = None) -> None:
        """
        Initialize the client.

        Args:
            settings: Client settings; read from the environment if omitted
            http: Optional shared httpx.Client. If omitted, one is created
                and owned by this instance.
        """
        self._settings = settings or EdgarSettings()
        self._owns_http = http is None
        self._http = http or httpx.Client(follow_redirects=True, timeout=self._settings.timeout_s)
        self._headers = _headers(self._settings)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "EdgarClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get(self, url: str, params: dict[str, str] | None = None) -> bytes:
        """
        Fetch a URL and return the raw response body.

        Raises:
            TransportError: On any non-success status or network failure
        """
        request_url = self._settings.build_url(url)
        log.debug("GET %s", request_url)
        try:
            response = self._http.get(request_url, params=params, headers=self._headers)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise _transport_error(request_url, e) from e
        return response.content

    def submissions(self, cik: str | int) -> SubmissionData:
        return decode_response(SubmissionData, self.get(submissions_url(cik)), "submissions")

    def submissions_file(self, filename: str) -> RecentFilingsPage:
        """Fetch one continuation page of filing history, e.g. CIK0000320193-submissions-001.json."""
        return decode_response(RecentFilingsPage, self.get(submissions_file_url(filename)), "submissions_file")

    def all_filings(self, cik: str | int) -> list[Filing]:
        """
        Fetch a company's complete filing history.

        Raises:
            TransportError: If the submissions document cannot be fetched
            DeserializationError: If the submissions document is malformed
            AggregationError: If any continuation page fails
        """
        return merge_all_filings(self.submissions(cik), self.submissions_file)

    def company_concept(self, cik: str | int, taxonomy: Taxonomy | str, tag: str) -> CompanyConcept:
        return decode_response(
            CompanyConcept, self.get(company_concept_url(cik, taxonomy, tag)), "company_concept"
        )

    def company_facts(self, cik: str | int) -> CompanyFacts:
        return decode_response(CompanyFacts, self.get(company_facts_url(cik)), "company_facts")

    def frames(self, taxonomy: Taxonomy | str, tag: str, unit: Unit | str, period: Period | str) -> Frame:
        return decode_response(Frame, self.get(frames_url(taxonomy, tag, unit, period)), "frames")

    def company_tickers(self) -> CompanyTickerDirectory:
        return decode_response(CompanyTickerDirectory, self.get(COMPANY_TICKERS_URL), "company_tickers")

    def company_tickers_mf(self) -> MutualFundTickerDirectory:
        return decode_response(MutualFundTickerDirectory, self.get(COMPANY_TICKERS_MF_URL), "company_tickers_mf")

    def download_bulk(self, kind: str, output_dir: Path | str) -> Path:
        """
        Download a bulk archive and extract it.

        Args:
            kind: "submissions" or "companyfacts"
            output_dir: Directory to extract into (created if missing)

        Returns:
            Path to the output directory

        Raises:
            ValueError: If kind is unknown or the archive is not a zip file
            TransportError: If the download fails
        """
        if kind not in BULK_ARCHIVES:
            raise ValueError(f"Unknown bulk archive '{kind}', expected one of {sorted(BULK_ARCHIVES)}")

        output_path = Path(output_dir)
        output_path.mkdir(parents=True, exist_ok=True)

        archive_path = output_path / f"{kind}.zip"
        archive_path.write_bytes(self.get(BULK_ARCHIVES[kind]))
        log.debug("Downloaded %s to %s", kind, archive_path)

        try:
            with zipfile.ZipFile(archive_path) as archive:
                archive.extractall(output_path)
        except zipfile.BadZipFile as e:
            raise ValueError(f"Downloaded {kind} archive is not a valid zip file") from e
        finally:
            archive_path.unlink(missing_ok=True)

        return output_path


class AsyncEdgarClient:
    """Async counterpart of EdgarClient; continuation pages are fetched concurrently."""

    def __init__(
        self, settings: EdgarSettings | None = None, *, http: httpx.AsyncClient | None = None
    ) -> None:
        self._settings = settings or EdgarSettings()
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(follow_redirects=True, timeout=self._settings.timeout_s)
        self._headers = _headers(self._settings)

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "AsyncEdgarClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def get(self, url: str, params: dict[str, str] | None = None) -> bytes:
        """
        Fetch a URL and return the raw response body.

        Raises:
            TransportError: On any non-success status or network failure
        """
        request_url = self._settings.build_url(url)
        log.debug("GET %s", request_url)
        try:
            response = await self._http.get(request_url, params=params, headers=self._headers)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise _transport_error(request_url, e) from e
        return response.content

    async def submissions(self, cik: str | int) -> SubmissionData:
        return decode_response(SubmissionData, await self.get(submissions_url(cik)), "submissions")

    async def submissions_file(self, filename: str) -> RecentFilingsPage:
        return decode_response(
            RecentFilingsPage, await self.get(submissions_file_url(filename)), "submissions_file"
        )

    async def all_filings(self, cik: str | int) -> list[Filing]:
        """Fetch a company's complete filing history; see EdgarClient.all_filings."""
        return await merge_all_filings_async(await self.submissions(cik), self.submissions_file)

    async def company_concept(self, cik: str | int, taxonomy: Taxonomy | str, tag: str) -> CompanyConcept:
        return decode_response(
            CompanyConcept, await self.get(company_concept_url(cik, taxonomy, tag)), "company_concept"
        )

    async def company_facts(self, cik: str | int) -> CompanyFacts:
        return decode_response(CompanyFacts, await self.get(company_facts_url(cik)), "company_facts")

    async def frames(
        self, taxonomy: Taxonomy | str, tag: str, unit: Unit | str, period: Period | str
    ) -> Frame:
        return decode_response(Frame, await self.get(frames_url(taxonomy, tag, unit, period)), "frames")

    async def company_tickers(self) -> CompanyTickerDirectory:
        return decode_response(CompanyTickerDirectory, await self.get(COMPANY_TICKERS_URL), "company_tickers")

    async def company_tickers_mf(self) -> MutualFundTickerDirectory:
        return decode_response(
            MutualFundTickerDirectory, await self.get(COMPANY_TICKERS_MF_URL), "company_tickers_mf"
        )
