"""Auth Log Analyzer package"""

from .patterns import VERSION, UNKNOWN_KEY, EVENT_MARKERS
from .models import EventKind, ExtractedFields, Findings, RankedEntry, Report
from .analyzer import LogAnalyzer, classify, classify_and_extract, consume
from .ranking import build_report, over_threshold, top_n
from .output import print_report, render_json, report_to_dict

__all__ = [
    'VERSION', 'UNKNOWN_KEY', 'EVENT_MARKERS',
    'EventKind', 'ExtractedFields', 'Findings', 'RankedEntry', 'Report',
    'LogAnalyzer', 'classify', 'classify_and_extract', 'consume',
    'build_report', 'over_threshold', 'top_n',
    'print_report', 'render_json', 'report_to_dict',
]
