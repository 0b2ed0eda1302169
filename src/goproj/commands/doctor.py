"""goproj doctor - Check the tools goproj needs."""

import click
from rich.console import Console
from rich.table import Table

from goproj.core.config import GoprojConfig
from goproj.core.runner import CommandRunner

console = Console()


@click.command()
@click.pass_obj
def doctor_cmd(config: GoprojConfig):
    """Check that go and git are installed.

    go is required; git is only needed for --git.
    """
    config = config or GoprojConfig()
    checks = collect_checks(config)

    table = Table(title="goproj doctor")
    table.add_column("Tool", style="cyan")
    table.add_column("Status")
    table.add_column("Used for")

    for check in checks:
        status = "[green]found[/]" if check["found"] else "[red]missing[/]"
        table.add_row(check["tool"], status, check["purpose"])

    console.print(table)
    console.print(f"\nProjects directory: [cyan]{config.base_dir}[/]")

    if not checks[0]["found"]:
        console.print(
            f"\n[red]Error:[/] {config.go_command} not found. "
            "Install Go: https://go.dev/dl/"
        )
        raise SystemExit(1)


def collect_checks(config: GoprojConfig) -> list:
    """Availability of each external tool, required tools first."""
    return [
        {
            "tool": config.go_command,
            "found": CommandRunner.is_available(config.go_command),
            "purpose": "go mod init, go get",
        },
        {
            "tool": config.git_command,
            "found": CommandRunner.is_available(config.git_command),
            "purpose": "git init (--git)",
        },
    ]
