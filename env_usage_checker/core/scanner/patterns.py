"""
正则表达式模式定义

环境变量引用的提取模式与默认扫描范围。
"""

import re

# 支持的命名空间: process.env 与 import.meta.env
ENV_NAMESPACES: dict[str, str] = {
    "process": r"process\.env",
    "import_meta": r"import\.meta\.env",
}

# 点访问与下标访问，只接受大写蛇形命名
ENV_VAR_PATTERNS: list[tuple[str, re.Pattern]] = [
    (f"{namespace}.{form}", re.compile(prefix + suffix))
    for namespace, prefix in ENV_NAMESPACES.items()
    for form, suffix in (
        ("dotted", r"\.([A-Z0-9_]+)"),
        ("bracket", r"\[['\"]([A-Z0-9_]+)['\"]\]"),
    )
]

# 解构: const { A, b: c, d = 1 } = process.env
DESTRUCTURE_PATTERN = re.compile(
    r"\b(?:const|let|var)\s*\{\s*([^{}]+?)\s*\}\s*=\s*"
    r"(?:" + "|".join(ENV_NAMESPACES.values()) + r")"
)

# 解构出的名称允许大小写混合
DESTRUCTURED_NAME_PATTERN = re.compile(r"[A-Za-z0-9_]+")

# 重命名 (a: b) 或默认值 (a = 1) 的后缀
RENAME_OR_DEFAULT_SUFFIX = re.compile(r"[:=].*$", re.DOTALL)

# 默认扫描的源码扩展名
SOURCE_EXTENSIONS: tuple[str, ...] = ("js", "ts", "jsx", "tsx")

_EXT_GROUP = "{" + ",".join(SOURCE_EXTENSIONS) + "}"

# 默认 glob 模式：常见源码目录和根目录文件
DEFAULT_GLOB_PATTERNS: list[str] = [
    f"src/**/*.{_EXT_GROUP}",
    f"pages/**/*.{_EXT_GROUP}",
    f"components/**/*.{_EXT_GROUP}",
    f"app/**/*.{_EXT_GROUP}",
    f"*.{_EXT_GROUP}",
]
