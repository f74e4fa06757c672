"""Auth Log Analyzer - Core analysis engine

Files are split on line feeds only; a stray carriage return stays inside its
line. Bytes that are not valid UTF-8 are decoded as U+FFFD, so keys differing
only in such bytes are counted together.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

from rich.progress import Progress, SpinnerColumn, TextColumn

from .extractors import (
    extract_ip_after_from,
    extract_ssh_failed_user,
    extract_sudo_user,
    extract_user_after_phrase,
)
from .models import EventKind, ExtractedFields, Findings
from .patterns import ACCEPTED_PASSWORD_ANCHOR, EVENT_MARKERS, UNKNOWN_KEY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationRule:
    """Markers that must all appear in a line, and how to pull its fields"""
    kind: EventKind
    markers: Tuple[str, ...]
    extract: Callable[[str], ExtractedFields]

    def matches(self, line: str) -> bool:
        return all(marker in line for marker in self.markers)


def _ssh_failed_fields(line: str) -> ExtractedFields:
    return ExtractedFields(username=extract_ssh_failed_user(line),
                           ip=extract_ip_after_from(line))


def _ssh_accepted_fields(line: str) -> ExtractedFields:
    return ExtractedFields(username=extract_user_after_phrase(line, ACCEPTED_PASSWORD_ANCHOR),
                           ip=extract_ip_after_from(line))


def _sudo_fields(line: str) -> ExtractedFields:
    return ExtractedFields(username=extract_sudo_user(line))


_EXTRACTORS = {
    EventKind.SSH_FAILED_LOGIN: _ssh_failed_fields,
    EventKind.SSH_SUCCESSFUL_LOGIN: _ssh_accepted_fields,
    EventKind.SUDO_AUTH_FAILURE: _sudo_fields,
}

# Priority order comes from EVENT_MARKERS
RULES: List[ClassificationRule] = [
    ClassificationRule(kind=EventKind(name), markers=markers, extract=_EXTRACTORS[EventKind(name)])
    for name, markers in EVENT_MARKERS.items()
]

# Counters fed by each event kind: (counter name, field)
_TRACKED = {
    EventKind.SSH_FAILED_LOGIN: ('ssh_failed_total',
                                 (('ssh_failed_by_user', 'username'), ('ssh_failed_by_ip', 'ip'))),
    EventKind.SSH_SUCCESSFUL_LOGIN: ('ssh_accepted_total',
                                     (('ssh_accepted_by_user', 'username'), ('ssh_accepted_by_ip', 'ip'))),
    EventKind.SUDO_AUTH_FAILURE: ('sudo_authfail_total',
                                  (('sudo_authfail_by_user', 'username'),)),
}


def classify(line: str) -> EventKind:
    for rule in RULES:
        if rule.matches(line):
            return rule.kind
    return EventKind.NONE


def classify_and_extract(line: str) -> Tuple[EventKind, ExtractedFields]:
    """Classify a raw line and extract its username and/or source IP."""
    for rule in RULES:
        if rule.matches(line):
            return rule.kind, rule.extract(line)
    return EventKind.NONE, ExtractedFields()


def consume(line: str, findings: Findings) -> EventKind:
    """Fold one line into findings and return how it was classified.

    Fields that cannot be extracted are counted under UNKNOWN_KEY so the
    category total and its counters never drift apart.
    """
    findings.total_lines += 1
    kind, fields = classify_and_extract(line)
    if kind is EventKind.NONE:
        return kind

    total_name, counters = _TRACKED[kind]
    setattr(findings, total_name, getattr(findings, total_name) + 1)
    for counter_name, field_name in counters:
        key = getattr(fields, field_name)
        if key is None:
            logger.debug("Line %d: no %s found for %s", findings.total_lines, field_name, kind.value)
            key = UNKNOWN_KEY
        findings.counter(counter_name)[key] += 1
    return kind


class LogAnalyzer:
    """Single-pass analyzer owning the Findings of one run"""

    def __init__(self, console=None):
        self.console = console
        self.findings = Findings()

    def reset(self):
        self.findings = Findings()

    def analyze_lines(self, lines: Iterable[str]) -> Findings:
        for line in lines:
            consume(line.rstrip('\n'), self.findings)
        return self.findings

    def analyze_file(self, filepath: str) -> Findings:
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Log file not found: {filepath}")

        self.reset()
        logger.debug("Analyzing %s", path)

        with open(path, 'r', encoding='utf-8', errors='replace', newline='\n') as f:
            if self.console is not None:
                with Progress(
                    SpinnerColumn(),
                    TextColumn("[progress.description]{task.description}"),
                    console=self.console,
                    transient=True
                ) as progress:
                    task = progress.add_task("Analyzing logs...", total=None)
                    for line in f:
                        consume(line.rstrip('\n'), self.findings)
                        progress.update(task, advance=1)
            else:
                self.analyze_lines(f)

        logger.debug(
            "Processed %d lines: %d failed, %d accepted, %d sudo failures",
            self.findings.total_lines,
            self.findings.ssh_failed_total,
            self.findings.ssh_accepted_total,
            self.findings.sudo_authfail_total,
        )
        return self.findings
