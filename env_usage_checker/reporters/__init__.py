"""
Reporters Layer - 报告层

包含 Rich 终端报告器和 JSON 报告器。
"""

from env_usage_checker.reporters.base import Reporter
from env_usage_checker.reporters.rich_reporter import RichReporter, EASTER_EGG_MESSAGE
from env_usage_checker.reporters.json_reporter import JsonReporter

__all__ = [
    "Reporter",
    "RichReporter",
    "JsonReporter",
    "EASTER_EGG_MESSAGE",
]
