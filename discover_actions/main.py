import logging
import os
import sys
from typing import List, Optional

import typer

from discover_actions.cli import CLI, StandardCLI
from discover_actions.globals.cli_config import CLIConfig

app = typer.Typer()


@app.callback(invoke_without_command=True)
def main(
    roots: Optional[List[str]] = typer.Argument(
        default=None, help="Directories to scan (defaults to the current directory)"
    ),
    repo: Optional[str] = typer.Option(
        None, "--repo", help="Repository identifier (owner/name) of the scanned code"
    ),
    readme: bool = typer.Option(False, "--readme", help="Fetch the repository README"),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Write a JSON report to this file or directory"
    ),
    workers: int = typer.Option(8, "--workers", help="Dockerfiles processed concurrently"),
    quiet: bool = typer.Option(False, help="Suppress warning-level problems in output"),
    verbose: bool = typer.Option(False, help="Enable debug logging"),
):
    """Main CLI entry point for discover-actions.

    Finds GitHub Actions below the given directories, either through their
    action.yml manifest or through com.github.actions labels in a Dockerfile,
    and prints their metadata.

    Environment Variables:
        GH_TOKEN: GitHub token for API access (used with --readme)

    Examples:
        Scan the current directory:
            $ discover-actions

        Scan two checkouts and write a report:
            $ discover-actions actions/checkout actions/cache -o reports/
    """
    # without --verbose only warnings reach stderr, through logging's last resort handler
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = CLIConfig(
        roots=roots or ["."],
        repository=repo,
        github_token=os.getenv("GH_TOKEN"),
        fetch_readme=readme,
        output=output,
        max_workers=workers,
        quiet=quiet,
        verbose=verbose,
    )

    cli: CLI = StandardCLI(config)
    exit_code = cli.run()
    sys.exit(exit_code)
