"""
Rich 终端报告器 - 使用 Rich 库输出分节报告

标题 → 分隔线 → (彩蛋) → 缺失变量 → 空行 → 未使用变量 → 分隔线
"""

from rich.console import Console
from rich.markup import escape

from env_usage_checker.core.scanner.models import ScanResult


SEPARATOR = "─" * 30

EASTER_EGG_MESSAGE = "🤫Congratulations! Now keep this a secret like your .env"


class RichReporter:
    """Rich 终端报告器"""

    def __init__(self, console: Console | None = None, show_sources: bool = False):
        self.console = console or Console()
        self.show_sources = show_sources

    def report(self, result: ScanResult, easter_egg: bool = False) -> None:
        """生成 Rich 格式报告"""
        self.console.print()
        self.console.print("✅ Env Usage Report", style="bold blue")
        self.console.print()
        self.console.print(SEPARATOR, style="dim")
        self.console.print()

        if easter_egg:
            self.console.print(f"    {EASTER_EGG_MESSAGE}", style="bold magenta")
            self.console.print()

        self._print_missing(result)
        self.console.print()
        self._print_unused(result)

        self.console.print()
        self.console.print(SEPARATOR, style="dim")
        self.console.print()

    def _print_missing(self, result: ScanResult) -> None:
        if not result.missing:
            self.console.print("✔ No missing variables!", style="green")
            return

        self.console.print(
            f"❌ Used but not defined in {escape(result.env_file)}:", style="bold red"
        )
        for name in result.missing:
            self.console.print(f"   • {name}", style="red")
            if self.show_sources:
                for file_path in result.sources_for(name):
                    self.console.print(f"       [dim]{escape(file_path)}[/dim]")

    def _print_unused(self, result: ScanResult) -> None:
        if not result.unused:
            self.console.print("✔ No unused variables!", style="green")
            return

        self.console.print("⚠ Defined but not used in code:", style="bold yellow")
        for name in result.unused:
            self.console.print(f"   • {name}", style="yellow")
