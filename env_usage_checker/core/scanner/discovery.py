"""
源码文件发现

展开 glob 模式（支持 {a,b} 花括号），去重并按路径排序。
"""

import glob
import logging
import os
from pathlib import Path
from typing import Iterable, Optional

from env_usage_checker.core.scanner.patterns import DEFAULT_GLOB_PATTERNS
from env_usage_checker.filters.pathspec_filter import PathspecFilter

logger = logging.getLogger(__name__)


def _find_brace_group(pattern: str) -> Optional[tuple[int, int]]:
    """返回第一个顶层 {...} 的起止下标，没有则返回 None"""
    depth = 0
    start = -1
    for i, char in enumerate(pattern):
        if char == '{':
            if depth == 0:
                start = i
            depth += 1
        elif char == '}' and depth > 0:
            depth -= 1
            if depth == 0:
                return start, i
    return None


def _split_alternatives(body: str) -> list[str]:
    """按顶层逗号拆分花括号内容"""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in body:
        if char == ',' and depth == 0:
            parts.append(''.join(current))
            current = []
            continue
        if char == '{':
            depth += 1
        elif char == '}':
            depth -= 1
        current.append(char)
    parts.append(''.join(current))
    return parts


def expand_braces(pattern: str) -> list[str]:
    """
    展开花括号模式

    例如 "src/**/*.{js,ts}" -> ["src/**/*.js", "src/**/*.ts"]。
    支持嵌套；不含逗号的 {x} 按字面保留。
    """
    group = _find_brace_group(pattern)
    if group is None:
        return [pattern]

    start, end = group
    prefix, body, suffix = pattern[:start], pattern[start + 1:end], pattern[end + 1:]
    alternatives = _split_alternatives(body)
    if len(alternatives) < 2:
        return [prefix + '{' + alt + '}' + rest
                for alt in expand_braces(body)
                for rest in expand_braces(suffix)]

    expanded: list[str] = []
    for alt in alternatives:
        for candidate in expand_braces(prefix + alt + suffix):
            if candidate not in expanded:
                expanded.append(candidate)
    return expanded


def _relative_key(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def discover_files(
    root: Path,
    patterns: Optional[Iterable[str]] = None,
    path_filter: Optional[PathspecFilter] = None,
) -> list[Path]:
    """
    根据 glob 模式查找待扫描的文件

    Args:
        root: 扫描根目录，相对模式以此为基准
        patterns: glob 模式列表，None 时使用默认模式
        path_filter: 排除过滤器

    Returns:
        去重后按相对路径排序的文件列表（不含目录）
    """
    if patterns is None:
        patterns = DEFAULT_GLOB_PATTERNS

    found: dict[str, Path] = {}
    for pattern in patterns:
        for expanded in expand_braces(pattern):
            for match in glob.glob(expanded, root_dir=root, recursive=True):
                path = Path(os.path.normpath(root / match))
                if not path.is_file():
                    continue
                found.setdefault(_relative_key(path, root), path)

    files = [found[key] for key in sorted(found)]
    if path_filter is not None:
        kept = path_filter.filter_paths(files)
        logger.debug(f"Excluded {len(files) - len(kept)} files by pattern")
        files = kept

    logger.debug(f"Discovered {len(files)} candidate files")
    return files
