"""Client settings.

Values are read from environment variables prefixed with ``EDGAR_``:

* ``EDGAR_USER_AGENT``
* ``EDGAR_BASE_URL``
* ``EDGAR_TIMEOUT_S``
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

HTTPS = "https://"


class EdgarSettings(BaseSettings):
    """Configuration for the EDGAR HTTP client."""

    user_agent: str = Field(
        "edgar-client/0.1.0 (contact@example.com)",
        description="User agent sent to EDGAR. The SEC asks for a company name and contact email.",
    )
    base_url: str = Field(
        HTTPS,
        description=(
            "Prefix that replaces 'https://' in every request URL. Set to e.g. "
            "'https://proxy.example.com/' to route requests through a proxy."
        ),
    )
    timeout_s: float = Field(30.0, description="Per-request timeout in seconds.")

    model_config = SettingsConfigDict(env_prefix="EDGAR_", extra="ignore")

    def build_url(self, url: str) -> str:
        """
        Apply the configured base URL to an https URL.

        With base_url "https://proxy.example.com/",
        "https://data.sec.gov/x.json" becomes
        "https://proxy.example.com/data.sec.gov/x.json". Other URLs are
        returned unchanged.
        """
        if url.startswith(HTTPS):
            return f"{self.base_url}{url[len(HTTPS):]}"
        return url
