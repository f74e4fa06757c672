"""Auth Log Analyzer - Report output"""

import json
from typing import Dict, Iterable, Optional

from rich import box
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .models import RankedEntry, Report
from .patterns import ALERT_COUNTERS, COUNTERS

SECTIONS = (
    ("SSH FAILED LOGINS", 'ssh_failed_total', ('ssh_failed_by_ip', 'ssh_failed_by_user'), 'red'),
    ("SSH SUCCESSFUL LOGINS", 'ssh_accepted_total', ('ssh_accepted_by_ip', 'ssh_accepted_by_user'), 'green'),
    ("SUDO AUTH FAILURES", 'sudo_authfail_total', ('sudo_authfail_by_user',), 'yellow'),
)

ALERT_TITLES = {
    'ssh_failed_by_ip': "SSH failed by IP",
    'sudo_authfail_by_user': "Sudo auth failures by user",
    'ssh_failed_by_user': "SSH failed by user",
    'ssh_accepted_by_ip': "SSH accepted by IP",
    'ssh_accepted_by_user': "SSH accepted by user",
}


def _entries(entries: Iterable[RankedEntry], field: str):
    return [{field: entry.key, 'count': entry.count} for entry in entries]


def report_to_dict(report: Report) -> Dict:
    """Structured form of a report, as published by --json"""
    data = {
        'total_lines': report.total_lines,
        'ssh_failed_total': report.ssh_failed_total,
        'ssh_accepted_total': report.ssh_accepted_total,
        'sudo_authfail_total': report.sudo_authfail_total,
    }
    for name, meta in COUNTERS.items():
        data[meta['top_name']] = _entries(report.top[name], meta['field'])

    alerts = {'threshold': report.alert_threshold}
    for name in ALERT_COUNTERS:
        alerts[name] = _entries(report.alerts[name], COUNTERS[name]['field'])
    data['alerts'] = alerts
    return data


def render_json(report: Report) -> str:
    return json.dumps(report_to_dict(report), indent=2, ensure_ascii=False)


def _print_table(console, entries, field: str, style: str):
    if not entries:
        console.print("    (none)")
        return
    table = Table(box=box.ROUNDED)
    table.add_column("IP Address" if field == 'ip' else "Username", style=style)
    table.add_column("Count", style="white", justify="right")
    for entry in entries:
        table.add_row(escape(entry.key), str(entry.count))
    console.print(table)


def print_report(report: Report, console, source: Optional[str] = None):
    console.print("\n" + "═" * 70, style="cyan")
    console.print("            AUTH LOG ANALYZER REPORT", style="bold cyan")
    console.print("═" * 70, style="cyan")

    summary = ""
    if source:
        summary += f"File: [cyan]{escape(source)}[/]\n"
    summary += (
        f"Lines processed: [cyan]{report.total_lines:,}[/]\n"
        f"SSH Failed Logins: [red]{report.ssh_failed_total:,}[/]\n"
        f"SSH Successful Logins: [green]{report.ssh_accepted_total:,}[/]\n"
        f"Sudo Auth Failures: [yellow]{report.sudo_authfail_total:,}[/]"
    )
    console.print(Panel.fit(summary, title="Summary", border_style="cyan"))

    for title, total_name, counters, style in SECTIONS:
        console.print("\n" + "─" * 70, style="cyan")
        console.print(f"{title}: {getattr(report, total_name):,}", style="bold")
        for name in counters:
            field = COUNTERS[name]['field']
            console.print("  Top IPs:" if field == 'ip' else "  Top Usernames:")
            _print_table(console, report.top[name], field, style)

    if report.alerting_enabled:
        console.print("\n" + "─" * 70, style="cyan")
        console.print(f"ALERTS (threshold >= {report.alert_threshold})", style="bold red")
        triggered = [name for name in ALERT_COUNTERS if report.alerts[name]]
        if not triggered:
            console.print("  No alert thresholds exceeded.", style="green")
        for name in triggered:
            console.print(f"  {ALERT_TITLES[name]}:")
            _print_table(console, report.alerts[name], COUNTERS[name]['field'], "red")

    console.print("\n" + "═" * 70, style="cyan")
    console.print("Tip: use --json for machine-readable output.", style="dim")
