"""Auth Log Analyzer - Ranking and report assembly"""

from typing import List, Mapping

from .models import Findings, RankedEntry, Report
from .patterns import COUNTERS, DEFAULT_ALERT_THRESHOLD, DEFAULT_TOP


def _ranked(items) -> List[RankedEntry]:
    # count descending, then key ascending
    ordered = sorted(items, key=lambda kv: (-kv[1], kv[0]))
    return [RankedEntry(key=key, count=count) for key, count in ordered]


def top_n(counter: Mapping[str, int], n: int) -> List[RankedEntry]:
    """Up to n entries with the highest counts, ties broken by key."""
    if n <= 0:
        raise ValueError(f"top_n requires a positive size, got {n}")
    return _ranked(counter.items())[:n]


def over_threshold(counter: Mapping[str, int], threshold: int) -> List[RankedEntry]:
    """Every entry whose count is at least threshold; nothing when threshold <= 0."""
    if threshold <= 0:
        return []
    return _ranked((key, count) for key, count in counter.items() if count >= threshold)


def build_report(findings: Findings, top: int = DEFAULT_TOP,
                 alert_threshold: int = DEFAULT_ALERT_THRESHOLD) -> Report:
    return Report(
        total_lines=findings.total_lines,
        ssh_failed_total=findings.ssh_failed_total,
        ssh_accepted_total=findings.ssh_accepted_total,
        sudo_authfail_total=findings.sudo_authfail_total,
        alert_threshold=max(alert_threshold, 0),
        top={name: tuple(top_n(findings.counter(name), top)) for name in COUNTERS},
        alerts={name: tuple(over_threshold(findings.counter(name), alert_threshold)) for name in COUNTERS},
    )
