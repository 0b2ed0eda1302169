"""Main CLI entry point for goproj."""

import logging

import click
from rich.logging import RichHandler

from goproj import __version__
from goproj.core.config import load_config
from goproj.commands.new import new_cmd, kinds_cmd
from goproj.commands.doctor import doctor_cmd


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich; quiet unless --verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__, prog_name="goproj")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """goproj - Scaffold Go projects.

    \b
    Quick Start:
      goproj new my-tool                  CLI project (flag package)
      goproj new my-tool --cli-lib cobra  CLI project using cobra
      goproj new my-api -k api -g         HTTP API with a git repo
      goproj kinds                        List kinds and frameworks
      goproj doctor                       Check go and git

    \b
    Projects are created in $HOME/projects, or in $GOPROJ_PROJECTS_DIR
    when set. Settings can also live in ~/.config/goproj/config.json.
    """
    configure_logging(verbose)
    ctx.obj = load_config()


main.add_command(new_cmd, name="new")
main.add_command(kinds_cmd, name="kinds")
main.add_command(doctor_cmd, name="doctor")


if __name__ == "__main__":
    main()
