"""
Scanner 模块 - 扫描源码提取环境变量引用

模块化结构：
- models.py: 数据类定义
- patterns.py: 正则表达式模式与默认 glob
- dotenv.py: .env 文件解析
- discovery.py: 源码文件发现
- core.py: 提取与扫描函数
"""

from env_usage_checker.core.scanner.models import (
    SkippedFile,
    UsageScan,
    ScanResult,
)
from env_usage_checker.core.scanner.core import (
    scan_code_files,
    extract_env_vars,
    extract_destructured_names,
)
from env_usage_checker.core.scanner.dotenv import (
    DotEnvEntry,
    EnvFileError,
    ConfigNotFound,
    parse_dotenv_content,
    load_env_file,
)
from env_usage_checker.core.scanner.discovery import (
    discover_files,
    expand_braces,
)
from env_usage_checker.core.scanner.patterns import (
    DEFAULT_GLOB_PATTERNS,
    SOURCE_EXTENSIONS,
)

__all__ = [
    # Models
    "SkippedFile",
    "UsageScan",
    "ScanResult",
    # Core
    "scan_code_files",
    "extract_env_vars",
    "extract_destructured_names",
    # DotEnv
    "DotEnvEntry",
    "EnvFileError",
    "ConfigNotFound",
    "parse_dotenv_content",
    "load_env_file",
    # Discovery
    "discover_files",
    "expand_braces",
    "DEFAULT_GLOB_PATTERNS",
    "SOURCE_EXTENSIONS",
]
