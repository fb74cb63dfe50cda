"""Data models for EDGAR API responses."""

from datetime import date
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from edgar_client.cik import format_cik
from edgar_client.errors import DeserializationError

# Columnar keys of a filings block, mapped onto Filing fields
_FILING_COLUMNS = {
    "accessionNumber": "accession_number",
    "filingDate": "filing_date",
    "reportDate": "report_date",
    "acceptanceDateTime": "acceptance_date_time",
    "form": "form",
    "primaryDocument": "primary_document",
    "primaryDocDescription": "primary_doc_description",
    "fileNumber": "file_number",
    "items": "items",
    "size": "size",
    "isXBRL": "is_xbrl",
    "isInlineXBRL": "is_inline_xbrl",
}

_REQUIRED_COLUMNS = ("accessionNumber", "filingDate", "form")


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _rows_from_columns(block: Any) -> list[dict[str, Any]]:
    """Zip the parallel arrays of a filings block into one dict per filing."""
    if not isinstance(block, dict):
        raise ValueError(f"Filings block must be an object, got {type(block).__name__}")
    missing = [key for key in _REQUIRED_COLUMNS if key not in block]
    if missing:
        raise ValueError(f"Filings block is missing columns: {missing}")

    columns: dict[str, list] = {}
    for key, field in _FILING_COLUMNS.items():
        if key not in block:
            continue
        values = block[key]
        if not isinstance(values, list):
            raise ValueError(f"Filing column '{key}' must be a list")
        columns[field] = values

    lengths = {field: len(values) for field, values in columns.items()}
    if len(set(lengths.values())) > 1:
        raise ValueError(f"Filing columns have mismatched lengths: {lengths}")

    count = len(columns["form"])
    return [{field: values[i] for field, values in columns.items()} for i in range(count)]


class Filing(_Record):
    """Represents a single SEC filing."""

    form: str
    filing_date: date
    report_date: date | None = None
    accession_number: str | None = None
    primary_document: str | None = None
    acceptance_date_time: str | None = None
    primary_doc_description: str | None = None
    file_number: str | None = None
    items: str | None = None
    size: int | None = None
    is_xbrl: bool = False
    is_inline_xbrl: bool = False

    @field_validator(
        "report_date",
        "accession_number",
        "primary_document",
        "acceptance_date_time",
        "primary_doc_description",
        "file_number",
        "items",
        mode="before",
    )
    @classmethod
    def empty_string_is_missing(cls, v: Any) -> Any:
        """EDGAR sends "" rather than null for absent values."""
        return _blank_to_none(v)


class RecentFilingsPage(_Record):
    """
    One page of filing history.

    The API delivers filings as parallel arrays (one array per attribute).
    Those arrays are zipped into Filing rows on validation; arrays of
    different lengths are rejected rather than truncated.
    """

    filings: tuple[Filing, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def from_columns(cls, data: Any) -> Any:
        if isinstance(data, dict) and "filings" not in data:
            return {"filings": _rows_from_columns(data)}
        return data


class FileInfo(_Record):
    """Reference to an additional page of filing history."""

    name: str
    filing_count: int | None = Field(None, alias="filingCount")
    filing_from: date | None = Field(None, alias="filingFrom")
    filing_to: date | None = Field(None, alias="filingTo")


class FormerName(_Record):
    """A name the company previously filed under."""

    name: str
    from_date: str | None = Field(None, alias="from")
    to_date: str | None = Field(None, alias="to")


class TickerListing(_Record):
    """A ticker and the exchange it trades on."""

    ticker: str
    exchange: str | None = None


class SubmissionData(_Record):
    """A company's identity and most recent filing history."""

    cik: str
    name: str
    entity_type: str | None = Field(None, alias="entityType")
    sic: str | None = None
    sic_description: str | None = Field(None, alias="sicDescription")
    tickers: tuple[TickerListing, ...] = ()
    former_names: tuple[FormerName, ...] = Field((), alias="formerNames")
    recent: tuple[Filing, ...] = ()
    files: tuple[FileInfo, ...] = ()

    @field_validator("cik", mode="before")
    @classmethod
    def normalize_cik(cls, v: Any) -> str:
        return format_cik(v)

    @model_validator(mode="before")
    @classmethod
    def from_submissions_document(cls, data: Any) -> Any:
        """
        Reshape the raw submissions document.

        Pairs the index-aligned tickers/exchanges arrays and lifts the
        nested filings.recent and filings.files blocks.
        """
        if not isinstance(data, dict) or "recent" in data:
            return data
        if "filings" not in data:
            raise ValueError("Submissions document has no filings block")

        data = dict(data)
        tickers = data.pop("tickers", None) or []
        exchanges = data.pop("exchanges", None) or []
        if not isinstance(tickers, list) or not isinstance(exchanges, list):
            raise ValueError("tickers and exchanges must be lists")
        if len(tickers) != len(exchanges):
            raise ValueError(
                f"tickers ({len(tickers)}) and exchanges ({len(exchanges)}) differ in length"
            )
        data["tickers"] = [
            {"ticker": ticker, "exchange": exchange}
            for ticker, exchange in zip(tickers, exchanges)
        ]

        filings = data.pop("filings")
        if not isinstance(filings, dict):
            raise ValueError(f"filings must be an object, got {type(filings).__name__}")
        data["recent"] = _rows_from_columns(filings.get("recent"))
        data["files"] = filings.get("files") or []
        return data

    @property
    def continuation_files(self) -> tuple[str, ...]:
        """Names of the additional filing-history pages, in source order."""
        return tuple(f.name for f in self.files)


class ConceptValue(_Record):
    """One reported value of an XBRL concept."""

    val: float
    end: date
    form: str
    fp: str | None = None
    fy: int | None = None
    filed: date | None = None
    frame: str | None = None
    accn: str | None = None
    start: date | None = None


class Fact(_Record):
    """A tag within a taxonomy together with its values grouped by unit."""

    label: str | None = None
    description: str | None = None
    units: dict[str, tuple[ConceptValue, ...]] = {}


class CompanyFacts(_Record):
    """Every XBRL fact reported by one company, keyed by taxonomy then tag."""

    cik: str
    entity_name: str = Field(alias="entityName")
    facts: dict[str, dict[str, Fact]] = {}

    @field_validator("cik", mode="before")
    @classmethod
    def normalize_cik(cls, v: Any) -> str:
        return format_cik(v)


class CompanyConcept(_Record):
    """The reported history of a single concept for one company."""

    cik: str
    entity_name: str = Field(alias="entityName")
    taxonomy: str
    tag: str
    label: str | None = None
    description: str | None = None
    units: dict[str, tuple[ConceptValue, ...]] = {}

    @field_validator("cik", mode="before")
    @classmethod
    def normalize_cik(cls, v: Any) -> str:
        return format_cik(v)


class FrameEntry(_Record):
    """One company's value within a frame."""

    cik: str
    entity_name: str = Field(alias="entityName")
    val: float
    end: date
    accn: str | None = None
    loc: str | None = None

    @field_validator("cik", mode="before")
    @classmethod
    def normalize_cik(cls, v: Any) -> str:
        return format_cik(v)


class Frame(_Record):
    """A cross-company snapshot of one concept, unit and period."""

    taxonomy: str
    tag: str
    ccp: str | None = None
    uom: str | None = None
    label: str | None = None
    description: str | None = None
    pts: int | None = None
    data: tuple[FrameEntry, ...] = ()


class CompanyTicker(_Record):
    """A row of the company ticker directory."""

    cik: str
    name: str
    ticker: str
    exchange: str | None = None

    @field_validator("cik", mode="before")
    @classmethod
    def normalize_cik(cls, v: Any) -> str:
        return format_cik(v)


class MutualFundTicker(_Record):
    """A row of the mutual fund ticker directory."""

    cik: str
    series_id: str = Field(alias="seriesId")
    class_id: str = Field(alias="classId")
    symbol: str

    @field_validator("cik", mode="before")
    @classmethod
    def normalize_cik(cls, v: Any) -> str:
        return format_cik(v)


def _rows_from_table(data: Any) -> Any:
    """Turn a {"fields": [...], "data": [[...], ...]} table into row dicts."""
    if not isinstance(data, dict) or "entries" in data:
        return data

    fields = data.get("fields")
    table = data.get("data")
    if not isinstance(fields, list) or not isinstance(table, list):
        raise ValueError("Directory must have 'fields' and 'data' lists")
    rows = []
    for row in table:
        if not isinstance(row, list) or len(row) != len(fields):
            raise ValueError(f"Row {row!r} does not match fields {fields!r}")
        rows.append(dict(zip(fields, row)))
    return {"entries": rows}


class CompanyTickerDirectory(_Record):
    """The company_tickers_exchange.json directory."""

    entries: tuple[CompanyTicker, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def from_table(cls, data: Any) -> Any:
        return _rows_from_table(data)


class MutualFundTickerDirectory(_Record):
    """The company_tickers_mf.json directory."""

    entries: tuple[MutualFundTicker, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def from_table(cls, data: Any) -> Any:
        return _rows_from_table(data)


class Company(BaseModel):
    """Represents a company with ticker, CIK, and name."""

    ticker: str
    cik: str
    name: str
    exchange: str | None = None


class FilingFilter(BaseModel):
    """Filter criteria for SEC filings."""

    form_types: list[str] | None = None
    date_from: date | None = None
    date_to: date | None = None
    limit: int | None = 10

    @field_validator("limit")
    @classmethod
    def validate_limit(cls, v: int | None) -> int | None:
        """Validate limit is positive."""
        if v is not None and v <= 0:
            raise ValueError("Limit must be greater than 0")
        return v


ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_response(model: type[ModelT], raw: bytes, endpoint: str) -> ModelT:
    """
    Deserialize a raw JSON response into a model.

    Args:
        model: Model class describing the endpoint's response shape
        raw: Response body
        endpoint: Endpoint name, reported in errors

    Raises:
        DeserializationError: If the body is not JSON or does not match the model
    """
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        raise DeserializationError(endpoint, str(e)) from e
