"""
Core Layer - 核心层

包含 env 文件解析、源码扫描、差集比对和检查流程。
"""

from env_usage_checker.core.scanner import (
    scan_code_files,
    extract_env_vars,
    discover_files,
    load_env_file,
    ConfigNotFound,
    EnvFileError,
    ScanResult,
    UsageScan,
)
from env_usage_checker.core.differ import compare
from env_usage_checker.core.checker import ScanConfig, run_check

__all__ = [
    # scanner
    "scan_code_files",
    "extract_env_vars",
    "discover_files",
    "load_env_file",
    "ConfigNotFound",
    "EnvFileError",
    "ScanResult",
    "UsageScan",
    # differ
    "compare",
    # checker
    "ScanConfig",
    "run_check",
]
