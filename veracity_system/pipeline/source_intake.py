"""Boundary validation of raw search results.

Search collaborators hand over loosely-typed dicts. Intake turns them into
strict RawSource records before anything reaches the scoring core:
- domain derived from the URL host (lowercase, no www.)
- fact-checker domains tagged as source_type=factcheck and, when the search
  pass did not say otherwise, discovered_via=factcheck-preflight
- one source per domain, first occurrence wins, capped (default 12)

Malformed records raise InputError here; the scoring core never raises.
"""

from typing import Any, Iterable, Mapping, Sequence, Union
from urllib.parse import urlparse

from pydantic import ValidationError

from veracity_system.config.source_credibility import DEFAULT_FACTCHECK_DOMAINS
from veracity_system.data_management.schemas import (
    DiscoveredVia,
    RawSource,
    SourceType,
    normalize_domain,
)
from veracity_system.errors import InputError
from veracity_system.sifters.credibility import domain_matches

DEFAULT_SOURCE_CAP = 12

SourceRecord = Union[RawSource, Mapping[str, Any]]


def domain_of(url: str) -> str:
    """Normalized host of a URL, or "unknown" if it has none."""
    try:
        host = urlparse(url).hostname
    except ValueError:
        return "unknown"
    return normalize_domain(host) if host else "unknown"


def dedupe_by_domain(sources: Iterable[RawSource], cap: int = DEFAULT_SOURCE_CAP) -> list[RawSource]:
    """Keep the first source per domain, at most ``cap`` sources."""
    seen: set[str] = set()
    kept: list[RawSource] = []
    for source in sources:
        if source.domain in seen:
            continue
        seen.add(source.domain)
        kept.append(source)
        if len(kept) >= cap:
            break
    return kept


def validate_claim(claim: Any) -> str:
    """Return the stripped claim text, or raise InputError when it is empty."""
    if not isinstance(claim, str) or not claim.strip():
        raise InputError("Claim text must be a non-empty string")
    return claim.strip()


def build_raw_sources(
    records: Sequence[SourceRecord] | None,
    factcheck_domains: Iterable[str] = DEFAULT_FACTCHECK_DOMAINS,
    cap: int = DEFAULT_SOURCE_CAP,
) -> list[RawSource]:
    """
    Validate search results into RawSource records.

    Args:
        records: RawSource instances or dicts (snake_case or camelCase keys).
        factcheck_domains: Fact-checker allow-list used for tagging.
        cap: Maximum sources kept after domain de-duplication.

    Returns:
        De-duplicated RawSource list.

    Raises:
        InputError: If records is None or any record fails validation.
    """
    if records is None:
        raise InputError("sources must be a list, got None")

    factcheck = tuple(normalize_domain(d) for d in factcheck_domains)
    sources: list[RawSource] = []
    for index, record in enumerate(records):
        if isinstance(record, RawSource):
            source = record
        elif isinstance(record, Mapping):
            data = dict(record)
            if not data.get("domain") and isinstance(data.get("url"), str):
                data["domain"] = domain_of(data["url"])
            try:
                source = RawSource.model_validate(data)
            except ValidationError as e:
                raise InputError(f"Invalid source at index {index}: {e}") from e
        else:
            raise InputError(
                f"Invalid source at index {index}: expected a mapping, got {type(record).__name__}"
            )
        sources.append(_tag_provenance(source, factcheck))

    return dedupe_by_domain(sources, cap)


def _tag_provenance(source: RawSource, factcheck_domains: tuple[str, ...]) -> RawSource:
    """Fill missing source_type/discovered_via. Existing values are never replaced."""
    updates: dict[str, Any] = {}
    is_fact_checker = domain_matches(source.domain, factcheck_domains)

    if source.source_type is None and is_fact_checker:
        updates["source_type"] = SourceType.FACTCHECK
    if source.discovered_via is None:
        updates["discovered_via"] = (
            DiscoveredVia.FACTCHECK_PREFLIGHT if is_fact_checker else DiscoveredVia.SEARCH
        )

    return source.model_copy(update=updates) if updates else source


__all__ = [
    "DEFAULT_SOURCE_CAP",
    "build_raw_sources",
    "dedupe_by_domain",
    "domain_of",
    "validate_claim",
]
