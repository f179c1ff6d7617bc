"""
比对器 - 计算已声明与已使用变量的差集
"""

from typing import Iterable

from env_usage_checker.core.scanner.models import ScanResult, UsageScan


def compare(declared: Iterable[str], scan: UsageScan, env_file: str = ".env") -> ScanResult:
    """
    计算 missing（使用但未声明）与 unused（声明但未使用）

    Args:
        declared: env 文件中的变量名
        scan: 源码扫描结果
        env_file: env 文件显示名称

    Returns:
        不可变的比对结果，所有名称均已排序
    """
    declared_set = set(declared)
    used_set = scan.used

    return ScanResult(
        declared=tuple(sorted(declared_set)),
        used=tuple(sorted(used_set)),
        missing=tuple(sorted(used_set - declared_set)),
        unused=tuple(sorted(declared_set - used_set)),
        sources=tuple(
            (name, tuple(sorted(scan.sources[name]))) for name in sorted(scan.sources)
        ),
        files_scanned=tuple(scan.files_scanned),
        skipped_files=tuple(scan.skipped_files),
        env_file=env_file,
    )
