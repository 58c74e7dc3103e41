import os
from enum import Enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lib.constants import (
    CLOUDFLARE_V4_URL,
    CLOUDFLARE_V6_URL,
    DEFAULT_FILENAME,
    DEFAULT_HOUR,
    DEFAULT_LOCATION,
    GCORE_URL,
)


class ProviderResponse(BaseModel):
    """Structured provider response (Gcore public IP list)"""

    addresses: List[str] = []
    """IPv4 addresses and ranges"""
    addresses_v6: List[str] = []
    """IPv6 addresses and ranges"""

    @field_validator("addresses", "addresses_v6", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        # null lists are empty, null entries are blank and skipped when rendering
        if value is None:
            return []
        if isinstance(value, list):
            return ["" if ip is None else ip for ip in value]
        return value

    def all_addresses(self) -> List[str]:
        return self.addresses + self.addresses_v6


class TaskConfig(BaseModel):
    """Task configuration, built once at startup"""

    model_config = ConfigDict(frozen=True)

    location: str = DEFAULT_LOCATION
    """Directory to write the allowlist file to"""
    filename: str = DEFAULT_FILENAME
    """Name of the allowlist file"""
    hour: int = Field(default=DEFAULT_HOUR, ge=0, le=23)
    """Hour of the day (local time) at which the daily run fires"""
    gcore_url: str = GCORE_URL
    """Structured provider endpoint"""
    cloudflare_v4_url: str = CLOUDFLARE_V4_URL
    """Plain-text provider endpoint for IPv4"""
    cloudflare_v6_url: str = CLOUDFLARE_V6_URL
    """Plain-text provider endpoint for IPv6"""

    @property
    def filepath(self) -> str:
        return os.path.join(self.location, self.filename)


class Step(str, Enum):
    """Step enum"""

    fetch_gcore = "fetch_gcore"
    fetch_cloudflare_v4 = "fetch_cloudflare_v4"
    fetch_cloudflare_v6 = "fetch_cloudflare_v6"
    write = "write"
    reload = "reload"


class RunResult(BaseModel):
    """Outcome of a single pipeline run"""

    failed_step: Step | None = None
    """The step that failed, if any"""
    error: str | None = None
    """The error message of the failed step"""
    lines: int = 0
    """Number of lines written to the allowlist file"""
    written: bool = False
    """Whether the allowlist file was written"""
    reloaded: bool = False
    """Whether the reverse proxy was reloaded"""

    @property
    def ok(self) -> bool:
        return self.failed_step is None
