"""
Prometheus metrics for ksuid-kit.

Counts identifiers minted and parsed per variant. Exposing them is left to
the application (prometheus_client's default registry).
"""

from prometheus_client import Counter

ksuid_generated_total = Counter(
    "ksuid_generated_total",
    "Total number of identifiers constructed",
    ["variant"],
)

ksuid_parsed_total = Counter(
    "ksuid_parsed_total",
    "Total number of identifiers parsed from a stored representation",
    ["variant", "encoding"],  # encoding: bytes, hex, base36, base62
)


def record_generated(variant: str) -> None:
    """Increment the generated counter for a variant"""
    ksuid_generated_total.labels(variant=variant).inc()


def record_parsed(variant: str, encoding: str) -> None:
    """Increment the parsed counter for a variant and source encoding"""
    ksuid_parsed_total.labels(variant=variant, encoding=encoding).inc()
