"""Auth Log Analyzer - Data models"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .patterns import COUNTERS

_COUNTER_NAMES = tuple(COUNTERS)


class EventKind(str, Enum):
    """Security event a single log line represents"""
    SSH_FAILED_LOGIN = 'ssh_failed_login'
    SSH_SUCCESSFUL_LOGIN = 'ssh_successful_login'
    SUDO_AUTH_FAILURE = 'sudo_auth_failure'
    NONE = 'none'


@dataclass(frozen=True)
class ExtractedFields:
    """Fields pulled out of a classified line"""
    username: Optional[str] = None
    ip: Optional[str] = None


@dataclass(frozen=True)
class RankedEntry:
    key: str
    count: int


@dataclass
class Findings:
    """Running totals and frequency counters for one analysis run.

    Every classified line adds exactly one to its category total and one to
    each of that category's counters, so the values of each counter always
    sum to the matching total.
    """
    total_lines: int = 0

    ssh_failed_total: int = 0
    ssh_failed_by_ip: Counter = field(default_factory=Counter)
    ssh_failed_by_user: Counter = field(default_factory=Counter)

    ssh_accepted_total: int = 0
    ssh_accepted_by_ip: Counter = field(default_factory=Counter)
    ssh_accepted_by_user: Counter = field(default_factory=Counter)

    sudo_authfail_total: int = 0
    sudo_authfail_by_user: Counter = field(default_factory=Counter)

    def counter(self, name: str) -> Counter:
        if name not in _COUNTER_NAMES:
            raise KeyError(f"Unknown counter: {name}")
        return getattr(self, name)

    def merge(self, other: 'Findings') -> 'Findings':
        """Return a new Findings holding the key-wise sum of both runs."""
        merged = Findings(
            total_lines=self.total_lines + other.total_lines,
            ssh_failed_total=self.ssh_failed_total + other.ssh_failed_total,
            ssh_accepted_total=self.ssh_accepted_total + other.ssh_accepted_total,
            sudo_authfail_total=self.sudo_authfail_total + other.sudo_authfail_total,
        )
        for name in _COUNTER_NAMES:
            counter = merged.counter(name)
            counter.update(self.counter(name))
            counter.update(other.counter(name))
        return merged


@dataclass(frozen=True)
class Report:
    """Read-only snapshot of a finished run, handed to the renderers"""
    total_lines: int
    ssh_failed_total: int
    ssh_accepted_total: int
    sudo_authfail_total: int
    alert_threshold: int
    top: Mapping[str, Tuple[RankedEntry, ...]]
    alerts: Mapping[str, Tuple[RankedEntry, ...]]

    def __post_init__(self):
        object.__setattr__(self, 'top', MappingProxyType(dict(self.top)))
        object.__setattr__(self, 'alerts', MappingProxyType(dict(self.alerts)))

    @property
    def alerting_enabled(self) -> bool:
        return self.alert_threshold > 0
