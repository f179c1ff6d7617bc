"""
检查流程 - load → scan → diff

CLI 构造 ScanConfig 后调用 run_check，核心逻辑不读取进程环境。
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from env_usage_checker.core.differ import compare
from env_usage_checker.core.scanner.core import ProgressCallback, scan_code_files
from env_usage_checker.core.scanner.discovery import discover_files
from env_usage_checker.core.scanner.dotenv import load_env_file
from env_usage_checker.core.scanner.models import ScanResult
from env_usage_checker.core.scanner.patterns import DEFAULT_GLOB_PATTERNS
from env_usage_checker.filters.pathspec_filter import (
    PathspecFilter,
    DEFAULT_EXCLUDE_PATTERNS,
)

logger = logging.getLogger(__name__)


@dataclass
class ScanConfig:
    """
    扫描配置

    Attributes:
        root: 扫描根目录
        env_file: env 文件路径，相对路径以 root 为基准
        patterns: 待扫描文件的 glob 模式
        exclude: 额外的排除模式（叠加在默认排除之上）
        use_gitignore: 是否同时排除 .gitignore 中的文件
    """
    root: Path = Path(".")
    env_file: Path = Path(".env")
    patterns: list[str] = field(default_factory=lambda: list(DEFAULT_GLOB_PATTERNS))
    exclude: list[str] = field(default_factory=list)
    use_gitignore: bool = False

    @property
    def env_path(self) -> Path:
        if self.env_file.is_absolute():
            return self.env_file
        return self.root / self.env_file


def run_check(config: ScanConfig, on_file: Optional[ProgressCallback] = None) -> ScanResult:
    """
    执行一次完整检查

    Raises:
        ConfigNotFound: env 文件不存在
        EnvFileError: env 文件无法读取
    """
    declared = load_env_file(config.env_path)

    path_filter = PathspecFilter(
        config.root,
        patterns=DEFAULT_EXCLUDE_PATTERNS + config.exclude,
        use_gitignore=config.use_gitignore,
    )
    files = discover_files(config.root, config.patterns, path_filter)
    scan = scan_code_files(config.root, files, on_file=on_file)

    result = compare(declared, scan, env_file=config.env_file.name)
    logger.info(
        f"Scanned {len(result.files_scanned)} files: "
        f"{len(result.missing)} missing, {len(result.unused)} unused"
    )
    return result
