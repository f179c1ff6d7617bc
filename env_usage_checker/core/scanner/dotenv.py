"""
DotEnv 文件解析

读取 .env 文件，提取已声明的环境变量。
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class EnvFileError(Exception):
    """env 文件错误基类"""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class ConfigNotFound(EnvFileError):
    """env 文件不存在"""

    def __init__(self, path: Path):
        super().__init__(f"{path.name} file not found: {path}", path)


@dataclass
class DotEnvEntry:
    """dotenv 文件条目"""
    name: str
    value: str = ""
    comment: Optional[str] = None
    line_number: int = 0


# KEY=VALUE 或 KEY: VALUE，可带 export 前缀
_ASSIGNMENT_PATTERN = re.compile(
    r'^(?:export\s+)?'
    r'([\w.-]+)'
    r'(?:\s*=|:(?=\s|$))\s*'
    r'(.*)$'
)
_COMMENT_PATTERN = re.compile(r'^\s*#\s*(.*)$')

# 引号值：匹配从开引号到闭引号，允许跨行
_QUOTED_PATTERNS: dict[str, re.Pattern] = {
    '"': re.compile(r'"((?:[^"\\]|\\.)*)"', re.DOTALL),
    "'": re.compile(r"'([^']*)'"),
    '`': re.compile(r'`([^`]*)`'),
}
_TRAILING_COMMENT_PATTERN = re.compile(r'^\s*(?:#\s*(.*))?$', re.DOTALL)


def _unescape_double_quoted(value: str) -> str:
    return value.replace('\\n', '\n').replace('\\r', '\r').replace('\\"', '"')


def _split_bare_value(rest: str) -> tuple[str, Optional[str]]:
    """未加引号的值：# 之后为注释"""
    value, sep, comment = rest.partition('#')
    return value.strip(), comment.strip() if sep else None


def _read_quoted_value(
    rest: str, lines: list[str], next_index: int
) -> Optional[tuple[str, Optional[str], int]]:
    """
    读取引号值，闭引号不在本行时继续读取后续行

    Returns:
        (值, 行内注释, 下一个待处理行的下标)；引号未闭合时返回 None
    """
    quote = rest[0]
    pattern = _QUOTED_PATTERNS[quote]
    text = rest
    index = next_index

    while True:
        match = pattern.match(text)
        if match:
            trailing = _TRAILING_COMMENT_PATTERN.match(text[match.end():])
            if trailing is None:
                return None
            value = match.group(1)
            if quote == '"':
                value = _unescape_double_quoted(value)
            comment = trailing.group(1)
            return value, comment.strip() if comment else None, index
        if index >= len(lines):
            return None
        text = text + '\n' + lines[index]
        index += 1


def parse_dotenv_content(content: str) -> list[DotEnvEntry]:
    """解析 .env 文件内容字符串

    引号值（"、'、`）可以跨多行，例如 PEM 私钥。
    """
    entries: list[DotEnvEntry] = []
    pending_comment: Optional[str] = None
    lines = content.splitlines()
    index = 0

    while index < len(lines):
        line_num = index + 1
        line = lines[index].strip()
        index += 1

        if not line:
            pending_comment = None
            continue

        comment_match = _COMMENT_PATTERN.match(line)
        if comment_match:
            pending_comment = comment_match.group(1).strip()
            continue

        match = _ASSIGNMENT_PATTERN.match(line)
        if not match:
            logger.debug(f"Ignoring line {line_num}: not an assignment")
            continue

        name, rest = match.group(1), match.group(2)
        quoted = None
        if rest[:1] in _QUOTED_PATTERNS:
            quoted = _read_quoted_value(rest, lines, index)

        if quoted is not None:
            value, inline_comment, index = quoted
        else:
            # 引号未闭合时按普通值处理本行
            value, inline_comment = _split_bare_value(rest)

        entries.append(DotEnvEntry(
            name=name,
            value=value,
            comment=inline_comment or pending_comment,
            line_number=line_num,
        ))
        pending_comment = None

    return entries


def load_env_file(file_path: Path) -> dict[str, str]:
    """
    读取并解析 env 文件

    Args:
        file_path: env 文件路径

    Returns:
        变量名 -> 值，重复声明时后者覆盖前者

    Raises:
        ConfigNotFound: 文件不存在
        EnvFileError: 文件存在但无法读取
    """
    if not file_path.is_file():
        raise ConfigNotFound(file_path)

    try:
        content = file_path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise EnvFileError(f"Failed to read {file_path}: {e}", file_path) from e

    declared = {entry.name: entry.value for entry in parse_dotenv_content(content)}
    logger.debug(f"Loaded {len(declared)} variables from {file_path}")
    return declared
