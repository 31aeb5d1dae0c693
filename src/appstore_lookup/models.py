"""
Data model for App Store lookups.

UpdateType, the injected LookupConfig, the LookupResult produced by a
successful lookup, and the LookupSuccess / LookupFailure outcome pair
delivered to completion handlers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .exceptions import StoreLookupError

DEFAULT_LOOKUP_URL = "https://itunes.apple.com/lookup"


class UpdateType(Enum):
    """Classification of the catalog version against the installed one."""
    REQUIRED = "required"
    OPTIONAL = "optional"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class LookupConfig:
    """Identity of the running application plus lookup settings"""
    identifier: str
    current_version: str
    lookup_url: str = DEFAULT_LOOKUP_URL
    country: Optional[str] = None  # Storefront code, e.g. "us", "de"
    timeout: Optional[float] = None  # None = transport default
    verbose: bool = False  # Log raw response payloads at DEBUG
    patch_optional: bool = False  # Last-component bumps become OPTIONAL


@dataclass(frozen=True)
class LookupResult:
    """Catalog metadata for the latest published version"""
    version: str
    release_notes: str
    artist_id: str
    update_type: UpdateType

    @property
    def update_available(self) -> bool:
        return self.update_type is not UpdateType.UNAVAILABLE


@dataclass(frozen=True)
class LookupSuccess:
    """Outcome of a lookup that produced a result."""
    result: LookupResult

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> LookupResult:
        return self.result


@dataclass(frozen=True)
class LookupFailure:
    """Outcome of a lookup that failed."""
    error: StoreLookupError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> LookupResult:
        raise self.error


LookupOutcome = Union[LookupSuccess, LookupFailure]
