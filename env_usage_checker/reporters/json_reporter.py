"""
JSON 报告器 - 输出 JSON 格式报告
"""

import sys
from typing import TextIO

from env_usage_checker.core.scanner.models import ScanResult


class JsonReporter:
    """JSON 报告器"""

    def __init__(self, output: TextIO | None = None):
        self._output = output

    @property
    def output(self) -> TextIO:
        return self._output or sys.stdout

    def report(self, result: ScanResult, easter_egg: bool = False) -> None:
        """生成 JSON 格式报告，彩蛋不进入机器可读输出"""
        print(result.to_json(), file=self.output)
