"""
CLI 入口模块 - 使用 Typer 构建命令行界面

检查流程：
1. 读取 env 文件
2. 发现并扫描源码文件
3. 计算缺失与未使用变量
4. 生成报告
"""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from env_usage_checker.core import (
    EnvFileError,
    ScanConfig,
    run_check,
)
from env_usage_checker.core.scanner.patterns import DEFAULT_GLOB_PATTERNS
from env_usage_checker.reporters import RichReporter, JsonReporter

# 彩蛋开关，直接读取进程环境而非 env 文件
EASTER_EGG_ENV = "EASTER_EGG"

# 创建 Typer 应用实例
app = typer.Typer(
    name="env-usage-checker",
    help="Env-Usage-Checker: find env vars used but not defined, and defined but never used.",
    add_completion=False,
)

# Rich Console：报告走 stdout，诊断信息走 stderr
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """为包日志器挂载 RichHandler（输出到 stderr）"""
    package_logger = logging.getLogger("env_usage_checker")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(
            console=err_console,
            show_time=False,
            show_path=False,
        ))


def easter_egg_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    """彩蛋仅在 EASTER_EGG 严格等于 "true" 时开启"""
    if environ is None:
        environ = os.environ
    return environ.get(EASTER_EGG_ENV) == "true"


@app.command()
def check(
    target: str = typer.Argument(
        ".",
        help="Project root to scan; env file and glob patterns resolve against it",
    ),
    env_file: Path = typer.Option(
        Path(".env"),
        "--env-file",
        "-e",
        help="Env file declaring the variables",
    ),
    patterns: Optional[list[str]] = typer.Option(
        None,
        "--pattern",
        "-p",
        help="Glob pattern of files to scan (repeatable, replaces the defaults)",
    ),
    exclude: Optional[list[str]] = typer.Option(
        None,
        "--exclude",
        "-x",
        help="Gitignore-style pattern to exclude (repeatable)",
    ),
    gitignore: bool = typer.Option(
        False,
        "--gitignore/--no-gitignore",
        help="Also exclude files matched by the root .gitignore",
    ),
    format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (default) or json",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed output",
    ),
) -> None:
    """
    Cross-reference env var usage in source files against an env file.

    Examples:
        env-usage-checker check
        env-usage-checker check ./my-app --env-file .env.local
        env-usage-checker check -p "lib/**/*.{js,mjs}" -x "**/*.test.js"
        env-usage-checker check --format json
    """
    configure_logging(verbose)

    if format not in ("rich", "json"):
        err_console.print(f"[red]Error:[/red] Unknown format: {escape(format)}")
        raise typer.Exit(1)

    root = Path(target).resolve()
    if not root.exists():
        err_console.print(f"[red]Error:[/red] Path does not exist: {escape(target)}")
        raise typer.Exit(1)
    if not root.is_dir():
        err_console.print(f"[red]Error:[/red] Path is not a directory: {escape(target)}")
        raise typer.Exit(1)

    config = ScanConfig(
        root=root,
        env_file=env_file,
        patterns=list(patterns) if patterns else list(DEFAULT_GLOB_PATTERNS),
        exclude=list(exclude or []),
        use_gitignore=gitignore,
    )
    logger.debug(f"Scanning {root} with patterns {config.patterns}")

    # 进度信息走 stderr，保证 --format json 时 stdout 干净
    on_file = None
    if verbose:
        def on_file(file_path: str) -> None:
            err_console.print(f"[dim]  {escape(file_path)}[/dim]")

    try:
        result = run_check(config, on_file=on_file)
    except EnvFileError as e:
        err_console.print(f"[red]❌ Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if verbose:
        err_console.print(f"[dim]  Scanned {len(result.files_scanned)} files[/dim]")

    if format == "json":
        reporter = JsonReporter()
    else:
        reporter = RichReporter(console, show_sources=verbose)

    reporter.report(result, easter_egg=easter_egg_enabled())

    # 缺失/未使用仅为提示，不影响退出码
    raise typer.Exit(0)


@app.command()
def version() -> None:
    """Show the version of Env-Usage-Checker."""
    from env_usage_checker import __version__
    console.print(f"[bold]Env-Usage-Checker[/bold] v{__version__}")


if __name__ == "__main__":
    app()
