"""
核心扫描函数

从源码文本中提取环境变量引用，并逐个扫描发现的文件。
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

from env_usage_checker.core.scanner.models import SkippedFile, UsageScan
from env_usage_checker.core.scanner.patterns import (
    ENV_VAR_PATTERNS,
    DESTRUCTURE_PATTERN,
    DESTRUCTURED_NAME_PATTERN,
    RENAME_OR_DEFAULT_SUFFIX,
)

logger = logging.getLogger(__name__)

# 进度回调类型
ProgressCallback = Callable[[str], None]


def extract_destructured_names(binding_list: str) -> list[str]:
    """
    解析解构声明花括号内的名称列表

    "A, b: c, d = 1" -> ["A", "b", "d"]，即取左侧绑定名。
    """
    names: list[str] = []
    for part in binding_list.split(','):
        name = RENAME_OR_DEFAULT_SUFFIX.sub('', part.strip()).strip()
        if name and DESTRUCTURED_NAME_PATTERN.fullmatch(name):
            names.append(name)
    return names


def extract_env_vars(content: str) -> set[str]:
    """从源码中提取环境变量引用（正则模式）

    点访问、下标访问和解构三类模式相互独立，结果取并集。
    """
    used: set[str] = set()

    for _, pattern in ENV_VAR_PATTERNS:
        for match in pattern.finditer(content):
            used.add(match.group(1))

    for match in DESTRUCTURE_PATTERN.finditer(content):
        used.update(extract_destructured_names(match.group(1)))

    return used


def _display_path(file_path: Path, root: Path) -> str:
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()


def scan_code_files(
    root: Path,
    files: Iterable[Path],
    on_file: Optional[ProgressCallback] = None,
) -> UsageScan:
    """
    依次读取并扫描文件

    读取失败的文件记录为跳过并继续，不中断整体扫描。
    """
    result = UsageScan()

    for file_path in files:
        rel_path = _display_path(file_path, root)
        try:
            content = file_path.read_text(encoding='utf-8', errors='ignore')
        except OSError as e:
            logger.warning(f"Skipping unreadable file {rel_path}: {e}")
            result.skipped_files.append(SkippedFile(rel_path, str(e)))
            continue

        if on_file:
            on_file(rel_path)

        names = extract_env_vars(content)
        logger.debug(f"{rel_path}: {len(names)} env var references")
        result.add(names, rel_path)
        result.files_scanned.append(rel_path)

    return result
