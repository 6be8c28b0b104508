"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from relink.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        from relink.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"relink {result.output.get('full_version', result.output.get('version', 'unknown'))}")
        return 0 if result.success else 1

    app = _create_app()
    try:
        rv = app(argv, standalone_mode=False)
        return rv if isinstance(rv, int) else 0
    except SystemExit as e:
        return int(e.code or 0)
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e.format_message()}", err=True)
        return e.exit_code
    except click.exceptions.Abort:
        typer.echo("Aborted", err=True)
        return 1
