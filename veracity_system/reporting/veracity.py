"""EQS to veracity score mapping for presentation.

| EQS      | Veracity | Label           |
|----------|----------|-----------------|
| > 75     | 90       | true            |
| > 60     | 75       | mostly_true     |
| > 50     | 60       | likely_true     |
| > 25     | 40       | mixed           |
| > 0      | 20       | false           |
| 0        | 0        | unsupported     |

No sources at all yields score 0 with the distinct ``no_evidence`` label, so
"nothing found" is not presented as "false".
"""

from veracity_system.data_management.schemas import VeracityVerdict

# (exclusive lower EQS bound, veracity score, label, summary)
VERACITY_BUCKETS: list[tuple[int, int, str, str]] = [
    (75, 90, "true",
     "This claim appears to be true based on strong evidence."),
    (60, 75, "mostly_true",
     "This claim appears to be mostly true based on available evidence."),
    (50, 60, "likely_true",
     "This claim appears to be likely true based on available evidence."),
    (25, 40, "mixed",
     "This claim has mixed evidence and requires further verification."),
    (0, 20, "false",
     "This claim appears to be false based on available evidence."),
]

UNSUPPORTED = (0, "unsupported", "No credible evidence supporting this claim was found.")
NO_EVIDENCE = (0, "no_evidence", "No evidence was found for this claim, so it could not be assessed.")


def to_veracity(eqs: int, source_count: int) -> VeracityVerdict:
    """
    Map an EQS to its veracity bucket.

    Args:
        eqs: Evidence Quality Score (0-100).
        source_count: Number of scored sources behind the EQS.

    Returns:
        VeracityVerdict with bucket score, label and summary sentence.
    """
    if source_count == 0:
        score, label, summary = NO_EVIDENCE
        return VeracityVerdict(score=score, label=label, summary=summary)

    for lower_bound, score, label, summary in VERACITY_BUCKETS:
        if eqs > lower_bound:
            return VeracityVerdict(score=score, label=label, summary=summary)

    score, label, summary = UNSUPPORTED
    return VeracityVerdict(score=score, label=label, summary=summary)


__all__ = ["VERACITY_BUCKETS", "to_veracity"]
