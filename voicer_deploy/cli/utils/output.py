# voicer_deploy/cli/utils/output.py
"""Output formatting utilities"""

from rich.console import Console
from rich.panel import Panel

from ...models import DeployResult

console = Console()


def _short(commit):
    return commit[:12] if commit else "<none>"


def format_deploy_result(result: DeployResult, out: Console = None) -> None:
    """Format and display deploy run result"""
    out = out or console

    if result.is_success:
        if result.short_circuited:
            lines = [
                "[green]✓[/green] Already up to date, nothing deployed",
                "",
                f"[bold]Commit:[/bold] {_short(result.current_commit)}",
            ]
        else:
            lines = [
                "[green]✓[/green] Deployment completed successfully!",
                "",
                f"[bold]Commit:[/bold] {_short(result.previous_commit)} → {_short(result.current_commit)}",
                f"[bold]Changed files:[/bold] {len(result.changed_files)}",
                f"[bold]Dependencies:[/bold] {'installed' if result.dependencies_installed else 'unchanged'}",
                f"[bold]Services:[/bold] {', '.join(result.verified_services)}",
            ]

        if result.duration is not None:
            lines.append(f"[bold]Duration:[/bold] {result.duration:.1f}s")

        if result.warnings:
            lines.append("")
            lines.append("[bold yellow]Warnings:[/bold yellow]")
            for warning in result.warnings:
                lines.append(f"  • {warning}")

        out.print(Panel("\n".join(lines), title="Deploy Result", border_style="green"))
        return

    phase = result.failed_phase.value if result.failed_phase else "unknown"
    lines = [f"[red]✗ Deployment failed ({phase}):[/red]"]
    for error in result.errors:
        lines.append(f"  • [{error.code}] {error.message}")
    if result.failed_service:
        lines.append("")
        lines.append(f"[bold]Failed service:[/bold] {result.failed_service}")
    if result.restarted_services:
        lines.append(f"[bold]Already restarted:[/bold] {', '.join(result.restarted_services)}")
    lines.append("")
    lines.append("[dim]Commit marker not updated; fix the problem and re-run.[/dim]")

    out.print(Panel("\n".join(lines), title="Deploy Error", border_style="red"))
