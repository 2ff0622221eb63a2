from __future__ import annotations

import sys

import typer

from student_roster.config import get_settings
from student_roster.demo import run_demo
from student_roster.utils.logging import configure_logging

app = typer.Typer(help="Student roster CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} | "
        f"json_logs={settings.json_logs}"
    )


@app.command()
def demo() -> None:
    """
    Run the fixed add/list/remove demonstration against an empty roster.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    run_demo()


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
