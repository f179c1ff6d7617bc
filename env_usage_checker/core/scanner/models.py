"""
数据模型定义

包含扫描器和比对器使用的所有数据类。
"""

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SkippedFile:
    """
    扫描时跳过的文件

    Attributes:
        file_path: 相对扫描根目录的路径
        reason: 跳过原因
    """
    file_path: str
    reason: str


@dataclass
class UsageScan:
    """
    源码扫描的累积结果

    Attributes:
        sources: 变量名 -> 引用它的文件集合
        files_scanned: 已扫描的文件（相对路径）
        skipped_files: 读取失败而跳过的文件
    """
    sources: dict[str, set[str]] = field(default_factory=dict)
    files_scanned: list[str] = field(default_factory=list)
    skipped_files: list[SkippedFile] = field(default_factory=list)

    @property
    def used(self) -> set[str]:
        return set(self.sources)

    def add(self, names: set[str], file_path: str) -> None:
        for name in names:
            self.sources.setdefault(name, set()).add(file_path)


@dataclass(frozen=True)
class ScanResult:
    """
    比对结果（不可变）

    missing = used - declared，unused = declared - used。
    所有集合均以排序后的元组保存，保证报告可复现且结果可哈希。
    sources 为 (变量名, 文件元组) 对的元组，按变量名排序。
    """
    declared: tuple[str, ...]
    used: tuple[str, ...]
    missing: tuple[str, ...]
    unused: tuple[str, ...]
    sources: tuple[tuple[str, tuple[str, ...]], ...] = ()
    files_scanned: tuple[str, ...] = ()
    skipped_files: tuple[SkippedFile, ...] = ()
    env_file: str = ".env"

    def sources_for(self, name: str) -> tuple[str, ...]:
        """引用该变量的文件（已排序），未使用时为空"""
        for source_name, files in self.sources:
            if source_name == name:
                return files
        return ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "env_file": self.env_file,
            "missing": list(self.missing),
            "unused": list(self.unused),
            "declared": list(self.declared),
            "used": list(self.used),
            "sources": {name: list(files) for name, files in self.sources},
            "files_scanned": list(self.files_scanned),
            "skipped_files": [
                {"file_path": sf.file_path, "reason": sf.reason}
                for sf in self.skipped_files
            ],
            "summary": {
                "declared": len(self.declared),
                "used": len(self.used),
                "missing": len(self.missing),
                "unused": len(self.unused),
                "files_scanned": len(self.files_scanned),
                "files_skipped": len(self.skipped_files),
            },
        }

    def to_json(self) -> str:
        """序列化为 JSON 字符串"""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)
