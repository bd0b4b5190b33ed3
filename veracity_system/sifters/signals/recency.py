"""Recency signal from a source's publish date.

Age buckets:
- <= 7 days: 1.0
- <= 30 days: 0.8
- <= 365 days: 0.6
- older: 0.4
- missing or unparseable: 0.5

Naive timestamps are read as UTC. Future dates count as fresh.
"""

from datetime import date, datetime, timezone
from typing import Optional

DEFAULT_RECENCY = 0.5

# (max_age_days, score), checked in order
RECENCY_BUCKETS: list[tuple[float, float]] = [
    (7, 1.0),
    (30, 0.8),
    (365, 0.6),
]
STALE_RECENCY = 0.4


def parse_publish_date(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 date or datetime; None when absent or malformed."""
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        try:
            parsed = datetime.combine(date.fromisoformat(text[:10]), datetime.min.time())
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class RecencyEstimator:
    """Buckets the age of a publish date relative to a reference time."""

    def score(self, publish_date: Optional[str], now: Optional[datetime] = None) -> float:
        """
        Args:
            publish_date: ISO-8601 string from the source record.
            now: Reference time (defaults to the current UTC time).

        Returns:
            Recency score in [0.4, 1.0], or 0.5 when the date is unusable.
        """
        published = parse_publish_date(publish_date)
        if published is None:
            return DEFAULT_RECENCY

        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        age_days = (now - published).total_seconds() / 86400
        for max_age, score in RECENCY_BUCKETS:
            if age_days <= max_age:
                return score
        return STALE_RECENCY
