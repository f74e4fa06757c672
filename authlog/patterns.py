"""Auth Log Analyzer - Constants and marker phrases"""

VERSION = "1.0.0"

# Reserved key for a field that could not be extracted
UNKNOWN_KEY = "(unknown)"

# Classification markers, checked in insertion order; first match wins
EVENT_MARKERS = {
    'ssh_failed_login': ("sshd", "Failed password for"),
    'ssh_successful_login': ("sshd", "Accepted password for "),
    'sudo_auth_failure': ("sudo", "authentication failure"),
}

# Extraction anchors
FROM_ANCHOR = " from "
FAILED_PASSWORD_ANCHOR = "Failed password for "
INVALID_USER_PREFIX = "invalid user "
ACCEPTED_PASSWORD_ANCHOR = "Accepted password for "
SUDO_USER_ANCHOR = "user="
SUDO_USER_DELIMITERS = (" ", ";", "\r", "\n", "\t")

# Trimmed from extracted values; ASCII whitespace only, other characters are kept
ASCII_WHITESPACE = " \t\n\v\f\r"

# Frequency counters: name -> key field name and published top-K list name
COUNTERS = {
    'ssh_failed_by_ip': {'field': 'ip', 'top_name': 'top_ssh_failed_ips'},
    'ssh_failed_by_user': {'field': 'username', 'top_name': 'top_ssh_failed_usernames'},
    'ssh_accepted_by_ip': {'field': 'ip', 'top_name': 'top_ssh_success_ips'},
    'ssh_accepted_by_user': {'field': 'username', 'top_name': 'top_ssh_success_usernames'},
    'sudo_authfail_by_user': {'field': 'username', 'top_name': 'top_sudo_usernames'},
}

# Alert lists in the order they are published
ALERT_COUNTERS = (
    'ssh_failed_by_ip',
    'sudo_authfail_by_user',
    'ssh_failed_by_user',
    'ssh_accepted_by_ip',
    'ssh_accepted_by_user',
)

# Defaults
DEFAULT_TOP = 10
DEFAULT_ALERT_THRESHOLD = 0  # 0 = alerting disabled
DEFAULT_OUTPUT_FORMAT = 'pretty'
OUTPUT_FORMATS = ('pretty', 'json')
