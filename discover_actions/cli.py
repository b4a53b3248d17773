from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from rich.progress import Progress, SpinnerColumn, TextColumn

from discover_actions.cli_components.output_formatter import ColoredFormatter, OutputFormatter
from discover_actions.cli_components.report_writer import ReportWriter
from discover_actions.cli_components.result_aggregator import (
    ResultAggregator,
    StandardResultAggregator,
)
from discover_actions.cli_components.scan_service import ScanService, StandardScanService
from discover_actions.globals.cli_config import CLIConfig
from discover_actions.globals.scan_result import ScanResult
from discover_actions.globals.web_fetcher import WebFetcher


class CLI(ABC):
    """Interface for CLI implementations."""

    @abstractmethod
    def run(self) -> int:
        """
        Run the CLI and return exit code.

        Returns:
            int: Exit code (0=success, 1=errors, 2=warnings only)
        """
        pass


class StandardCLI(CLI):
    """
    Standard CLI implementation with separated concerns.

    Coordinates scanning using pluggable components:
    - OutputFormatter: handles display formatting
    - ResultAggregator: collects and summarizes results
    - ScanService: runs the scan pipeline
    """

    def __init__(
        self,
        config: CLIConfig,
        formatter: Optional[OutputFormatter] = None,
        aggregator: Optional[ResultAggregator] = None,
        scan_service: Optional[ScanService] = None,
    ):
        """
        Initialize CLI with configuration and optional component overrides.

        Args:
            config: CLI configuration
            formatter: Output formatter (defaults to ColoredFormatter)
            aggregator: Result aggregator (defaults to StandardResultAggregator)
            scan_service: Scan service (defaults to StandardScanService)
        """
        self.config = config
        self.formatter = formatter or ColoredFormatter()
        self.aggregator = aggregator or StandardResultAggregator()
        self.scan_service = scan_service or StandardScanService(
            WebFetcher(github_token=config.github_token)
        )

    def run(self) -> int:
        """Scan every configured root, print the results and write the report.

        Returns:
            int: Exit code indicating scan results:
                - 0: Success (no problems)
                - 1: Errors found (e.g. a root is not a directory)
                - 2: Warnings only (malformed or unreadable files)
        """
        for root in self.config.roots:
            result = self._scan_root(Path(root))
            self.aggregator.add_result(result)
            self._display_result(result)

        exit_code = self.aggregator.get_exit_code()
        if self.config.output:
            try:
                path = ReportWriter(Path(self.config.output)).write(self.aggregator.get_results())
                print(f"Report written to {path}")
            except OSError as e:
                print(f"Could not write report to {self.config.output}: {e}")
                exit_code = 1

        self._display_summary()
        return exit_code

    def _scan_root(self, root: Path) -> ScanResult:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description=f"Scanning {root}...", total=None)
            return self.scan_service.scan(root, self.config)

    def _display_result(self, result: ScanResult) -> None:
        """Display scan results for a single root."""
        print(self.formatter.format_root_header(result.root))

        for manifest in result.manifests:
            print(self.formatter.format_manifest(manifest))
        for record in result.docker_actions:
            print(self.formatter.format_docker_action(record))
        if not result.action_count:
            print(self.formatter.format_no_actions())
        if result.readme:
            print(self.formatter.format_readme(result.readme))

        for problem in result.problems.problems:
            print(self.formatter.format_problem(problem))

    def _display_summary(self) -> None:
        print(
            self.formatter.format_summary(
                self.aggregator.get_total_actions(),
                self.aggregator.get_total_errors(),
                self.aggregator.get_total_warnings(),
                self.aggregator.get_max_level(),
            )
        )
