import dataclasses
from collections import Counter

import pytest

from authlog import Findings, RankedEntry, build_report, over_threshold, top_n

NOISY = Counter({
    "10.0.0.4": 3,
    "10.0.0.2": 3,
    "10.0.0.9": 7,
    "10.0.0.5": 3,
    "10.0.0.1": 3,
    "10.0.0.3": 3,
})


def test_top_n_orders_by_count_then_key():
    assert top_n(NOISY, 3) == [
        RankedEntry("10.0.0.9", 7),
        RankedEntry("10.0.0.1", 3),
        RankedEntry("10.0.0.2", 3),
    ]


def test_top_n_returns_everything_when_n_is_large():
    ranked = top_n(NOISY, 50)
    assert len(ranked) == 6
    assert [entry.key for entry in ranked] == [
        "10.0.0.9", "10.0.0.1", "10.0.0.2", "10.0.0.3", "10.0.0.4", "10.0.0.5"]


def test_top_n_ignores_insertion_order():
    reversed_counter = Counter(dict(reversed(list(NOISY.items()))))
    assert top_n(NOISY, 4) == top_n(NOISY, 4)
    assert top_n(reversed_counter, 4) == top_n(NOISY, 4)


def test_top_n_rejects_non_positive_size():
    with pytest.raises(ValueError):
        top_n(NOISY, 0)


def test_over_threshold_is_inclusive():
    assert over_threshold(NOISY, 3) == top_n(NOISY, 6)
    assert over_threshold(NOISY, 4) == [RankedEntry("10.0.0.9", 7)]
    assert over_threshold(NOISY, 8) == []


def test_over_threshold_disabled():
    assert over_threshold(NOISY, 0) == []
    assert over_threshold(NOISY, -5) == []
    assert len(over_threshold(NOISY, 1)) == len(NOISY)


def test_build_report_without_alerts():
    findings = Findings(ssh_failed_total=sum(NOISY.values()), ssh_failed_by_ip=Counter(NOISY))
    report = build_report(findings, top=2)

    assert report.ssh_failed_total == 22
    assert [entry.key for entry in report.top['ssh_failed_by_ip']] == ["10.0.0.9", "10.0.0.1"]
    assert report.top['sudo_authfail_by_user'] == ()
    assert not report.alerting_enabled
    assert all(entries == () for entries in report.alerts.values())


def test_build_report_with_alerts():
    findings = Findings(ssh_failed_total=sum(NOISY.values()), ssh_failed_by_ip=Counter(NOISY))
    report = build_report(findings, top=10, alert_threshold=5)

    assert report.alerting_enabled
    assert report.alerts['ssh_failed_by_ip'] == (RankedEntry("10.0.0.9", 7),)
    assert report.alerts['sudo_authfail_by_user'] == ()


def test_report_is_read_only():
    report = build_report(Findings())
    with pytest.raises(dataclasses.FrozenInstanceError):
        report.total_lines = 5
    with pytest.raises(TypeError):
        report.top['ssh_failed_by_ip'] = ()
