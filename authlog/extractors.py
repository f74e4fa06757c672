"""Auth Log Analyzer - Field extraction

Plain substring scanning over a single line. Each extractor returns None
when its anchor or a required delimiter is missing; callers decide what a
miss means.
"""

from typing import Optional

from .patterns import (
    ACCEPTED_PASSWORD_ANCHOR,
    ASCII_WHITESPACE,
    FAILED_PASSWORD_ANCHOR,
    FROM_ANCHOR,
    INVALID_USER_PREFIX,
    SUDO_USER_ANCHOR,
    SUDO_USER_DELIMITERS,
)


def _non_empty(value: str) -> Optional[str]:
    value = value.strip(ASCII_WHITESPACE)
    return value or None


def _word_before_space(line: str, start: int) -> Optional[str]:
    # A trailing token with no space after it does not count
    end = line.find(' ', start)
    if end == -1:
        return None
    return _non_empty(line[start:end])


def extract_ip_after_from(line: str) -> Optional[str]:
    """IP following " from ", up to the next space or end of line."""
    pos = line.find(FROM_ANCHOR)
    if pos == -1:
        return None
    start = pos + len(FROM_ANCHOR)
    end = line.find(' ', start)
    if end == -1:
        end = len(line)
    return _non_empty(line[start:end])


def extract_user_after_phrase(line: str, phrase: str = ACCEPTED_PASSWORD_ANCHOR) -> Optional[str]:
    pos = line.find(phrase)
    if pos == -1:
        return None
    return _word_before_space(line, pos + len(phrase))


def extract_ssh_failed_user(line: str) -> Optional[str]:
    """User from "Failed password for [invalid user ]<name> ..."."""
    pos = line.find(FAILED_PASSWORD_ANCHOR)
    if pos == -1:
        return None
    start = pos + len(FAILED_PASSWORD_ANCHOR)
    if line.startswith(INVALID_USER_PREFIX, start):
        start += len(INVALID_USER_PREFIX)
    return _word_before_space(line, start)


def extract_sudo_user(line: str) -> Optional[str]:
    """User from a pam "user=<name>" field."""
    pos = line.find(SUDO_USER_ANCHOR)
    if pos == -1:
        return None
    start = pos + len(SUDO_USER_ANCHOR)
    end = len(line)
    for delimiter in SUDO_USER_DELIMITERS:
        idx = line.find(delimiter, start)
        if idx != -1 and idx < end:
            end = idx
    return _non_empty(line[start:end])
