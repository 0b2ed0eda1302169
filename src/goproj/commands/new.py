"""goproj new - Create a new Go project."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from goproj.core.config import GoprojConfig
from goproj.core.errors import ProvisionAborted, ProvisionError
from goproj.core.provisioner import ProjectRequest, Provisioner
from goproj.templates import (
    FRAMEWORK_DESCRIPTIONS,
    KIND_DESCRIPTIONS,
    DependencyRegistry,
    TemplateRegistry,
    default_dependencies,
    default_templates,
)

console = Console()

# Exit statuses
EXIT_FAILURE = 1
EXIT_ABORTED = 3
EXIT_INTERRUPTED = 130


@click.command()
@click.argument("name", required=False)
@click.option(
    "--name", "-n", "name_option",
    help="Project name (alternative to NAME)",
)
@click.option(
    "--kind", "-k",
    type=click.Choice(["cli", "api", "app"]),
    default=None,
    help="Kind of project [default: cli]",
)
@click.option(
    "--module", "-m", "module_path",
    help="Go module path, e.g. github.com/user/myproject [default: NAME]",
)
@click.option(
    "--cli-lib", "--framework", "framework",
    default=None,
    help="CLI framework for the cli kind: flag, cobra, cli [default: flag]",
)
@click.option(
    "--git", "-g", "init_git",
    is_flag=True,
    help="Initialize a git repository",
)
@click.option(
    "--yes", "-y",
    is_flag=True,
    help="Continue without asking if the directory already exists",
)
@click.option(
    "--list-templates",
    is_flag=True,
    help="List available kinds and CLI frameworks",
)
@click.pass_obj
def new_cmd(
    config: Optional[GoprojConfig],
    name: Optional[str],
    name_option: Optional[str],
    kind: Optional[str],
    module_path: Optional[str],
    framework: Optional[str],
    init_git: bool,
    yes: bool,
    list_templates: bool,
):
    """Create a new Go project in the projects directory.

    NAME is the project directory name.

    \b
    Kinds:
      cli      Command-line tool (--cli-lib flag|cobra|cli)
      api      JSON HTTP API
      app      HTML web app

    If any step fails, the partially created project is removed.
    """
    config = config or GoprojConfig()
    templates = default_templates()
    dependencies = default_dependencies()

    if list_templates:
        show_templates(templates, dependencies)
        return

    request = ProjectRequest(
        name=name or name_option or "",
        kind=kind or config.default_kind,
        module_path=module_path,
        framework=framework or config.default_framework,
        init_vcs=init_git,
    )

    def confirm(path: Path) -> bool:
        if yes:
            return True
        return click.confirm(
            f"Directory {path} already exists. Do you want to continue?",
            default=False,
        )

    provisioner = Provisioner(
        config=config,
        templates=templates,
        dependencies=dependencies,
        confirm_overwrite=confirm,
        reporter=lambda message: console.print(f"  [green]✓[/] {message}"),
    )

    if request.name:
        console.print(Panel.fit(
            f"[bold blue]goproj new[/] - Creating [cyan]{request.name}[/] ({request.kind})",
            border_style="blue"
        ))

    try:
        target = provisioner.create_project(request)
    except ProvisionAborted as e:
        console.print(f"[yellow]Operation aborted.[/] {e.path} left unchanged")
        raise SystemExit(EXIT_ABORTED)
    except ProvisionError as e:
        _print_failure(e)
        raise SystemExit(EXIT_FAILURE)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/] Rollback attempted; any failure is logged above")
        raise SystemExit(EXIT_INTERRUPTED)

    console.print(
        f"\n[green]✓[/] Done. Created project '{request.name}' "
        f"of kind '{request.kind}' in [cyan]{target}[/]"
    )
    _print_next_steps(target, request.kind)


def _print_failure(error: ProvisionError) -> None:
    """Say which step failed and what happened to the partial project."""
    console.print(f"[red]Error:[/] {error.step} failed")
    console.print(f"  {error}")

    if error.rollback_error is not None:
        console.print(f"[red]Rollback failed:[/] {error.rollback_error}")
        console.print("  Remove the directory manually before retrying")
    elif error.rolled_back:
        console.print("[yellow]Partial project removed[/]")


def show_templates(templates: TemplateRegistry, dependencies: DependencyRegistry):
    """Show available kinds and frameworks."""
    console.print("\n[bold]Project Kinds[/]\n")

    table = Table()
    table.add_column("Kind", style="cyan")
    table.add_column("Description")

    for kind in templates.kinds():
        table.add_row(kind, KIND_DESCRIPTIONS.get(kind, ""))

    console.print(table)

    console.print("\n[bold]CLI Frameworks[/] (cli kind only)\n")

    table = Table()
    table.add_column("Framework", style="cyan")
    table.add_column("Description")
    table.add_column("Dependencies")

    for framework in dependencies.frameworks():
        deps = dependencies.dependencies_for(framework) or ()
        table.add_row(
            framework,
            FRAMEWORK_DESCRIPTIONS.get(framework, ""),
            ", ".join(deps) or "-",
        )

    console.print(table)

    console.print("\n[bold]Usage:[/]")
    console.print("  goproj new my-tool --cli-lib cobra -g")
    console.print("  goproj new my-api -k api -m github.com/me/my-api")


def _print_next_steps(target: Path, kind: str):
    """Print next steps after creation."""
    console.print(f"\n  cd {target}")
    console.print("  go run .")

    if kind == "api":
        console.print("  curl localhost:8080/ok")
    elif kind == "app":
        console.print("  open http://localhost:8080")


@click.command()
def kinds_cmd():
    """List project kinds and CLI frameworks."""
    show_templates(default_templates(), default_dependencies())
