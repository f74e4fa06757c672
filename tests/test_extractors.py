from authlog.extractors import (
    extract_ip_after_from,
    extract_ssh_failed_user,
    extract_sudo_user,
    extract_user_after_phrase,
)


def test_ip_after_from_stops_at_space():
    line = "sshd[1]: Failed password for root from 10.0.0.5 port 22 ssh2"
    assert extract_ip_after_from(line) == "10.0.0.5"


def test_ip_after_from_tolerates_end_of_line():
    assert extract_ip_after_from("sshd: Accepted password for root from 192.168.1.1") == "192.168.1.1"


def test_ip_after_from_missing_anchor_or_value():
    assert extract_ip_after_from("sshd: Failed password for root port 22") is None
    assert extract_ip_after_from("sshd: Failed password for root from  port 22") is None


def test_user_after_phrase_requires_following_space():
    phrase = "Accepted password for "
    assert extract_user_after_phrase("Accepted password for root from 1.2.3.4", phrase) == "root"
    assert extract_user_after_phrase("Accepted password for root", phrase) is None
    assert extract_user_after_phrase("Accepted publickey for root from 1.2.3.4", phrase) is None


def test_failed_user_skips_invalid_user_prefix():
    assert extract_ssh_failed_user("Failed password for invalid user admin from 1.2.3.4 port 22") == "admin"
    assert extract_ssh_failed_user("Failed password for root from 1.2.3.4 port 22") == "root"


def test_failed_user_without_following_space():
    assert extract_ssh_failed_user("Failed password for bob") is None
    assert extract_ssh_failed_user("Failed password for invalid user ") is None
    assert extract_ssh_failed_user("Failed password for") is None


def test_sudo_user_delimiters():
    assert extract_sudo_user("authentication failure; rhost= user=alice") == "alice"
    assert extract_sudo_user("user=alice;tty=pts/0") == "alice"
    assert extract_sudo_user("user=alice\ttty") == "alice"
    assert extract_sudo_user("user=alice\r") == "alice"
    assert extract_sudo_user("user=alice bob") == "alice"


def test_sudo_user_missing():
    assert extract_sudo_user("authentication failure; rhost=") is None
    assert extract_sudo_user("authentication failure; user=") is None
    assert extract_sudo_user("authentication failure; user=;tty") is None


def test_only_ascii_whitespace_is_trimmed():
    assert extract_sudo_user("authentication failure; user=\xa0bob\xa0") == "\xa0bob\xa0"
    assert extract_ip_after_from("sshd: Failed password for root from \x1c1.2.3.4") == "\x1c1.2.3.4"
    assert extract_ip_after_from("sshd: Accepted password for root from 1.2.3.4\x0b\x0c") == "1.2.3.4"
