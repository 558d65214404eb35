"""Runtime configuration for the catalog pipeline."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) "
    "Gecko/20100101 Firefox/121.0"
)


class CatalogSettings(BaseSettings):
    """Environment-aware settings for fetching studio catalogs."""

    base_url: str = Field(
        "http://www.imdb.com/search/title",
        description="Search endpoint queried for every catalog page.",
    )
    earliest_year: int = Field(
        1915, description="Oldest release year available in the upstream database."
    )
    max_items: int = Field(
        20000,
        description="Default ceiling; passes reporting at least this many items are aborted.",
    )
    page_size: int = Field(
        100, description="Number of results the upstream service returns per page."
    )
    header_lines: int = Field(
        11, description="Leading lines discarded from every markup-stripped region."
    )
    request_timeout: float = Field(
        30.0, description="Timeout in seconds applied to each page request."
    )
    user_agent: str = Field(
        DEFAULT_USER_AGENT, description="User-Agent header sent with page requests."
    )
    stop_on_empty_page: bool = Field(
        default=False,
        description="End a pass early when a follow-up page yields no records.",
    )

    model_config = SettingsConfigDict(
        env_prefix="IMDBGET_",
        env_file=".env",
        env_file_encoding="utf-8",
    )
