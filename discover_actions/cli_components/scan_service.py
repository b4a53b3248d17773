import dataclasses
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from discover_actions.globals.cli_config import CLIConfig
from discover_actions.globals.problems import ProblemLevel, Problems
from discover_actions.globals.scan_result import ScanResult
from discover_actions.globals.web_fetcher import IWebFetcher
from discover_actions.pipeline import Pipeline
from discover_actions.utils import strip_token


class ScanService(ABC):
    """Interface for services that scan a root directory for actions."""

    @abstractmethod
    def scan(self, root: Path, config: CLIConfig) -> ScanResult:
        """Scan a single root directory and return results."""
        pass


class StandardScanService(ScanService):
    """
    Standard scan service using the pipeline architecture.

    Runs a fresh pipeline per root, removes credentials from download URLs,
    sorts label-based actions by path and, if configured, attaches the
    repository README.
    """

    def __init__(self, web_fetcher: Optional[IWebFetcher] = None):
        self.web_fetcher = web_fetcher

    def scan(self, root: Path, config: CLIConfig) -> ScanResult:
        """Scan a single root directory and return results."""
        pipeline = Pipeline(repo=config.repository, max_workers=config.max_workers)
        result = pipeline.process(root)

        manifests = [
            dataclasses.replace(manifest, record=strip_token(manifest.record))
            for manifest in result.manifests
        ]
        docker_actions = sorted(
            (strip_token(record) for record in result.docker_actions),
            key=lambda record: record.path or "",
        )

        problems = result.problems
        problems.sort()
        if config.quiet:
            problems = self._filter_warnings(problems)

        return ScanResult(
            root=result.root,
            manifests=manifests,
            docker_actions=docker_actions,
            problems=problems,
            readme=self._fetch_readme(config),
        )

    def _fetch_readme(self, config: CLIConfig) -> Optional[str]:
        if not config.fetch_readme or self.web_fetcher is None or not config.repository:
            return None
        owner, _, name = config.repository.partition("/")
        if not owner or not name:
            return None
        return self.web_fetcher.fetch_readme(owner, name)

    def _filter_warnings(self, problems: Problems) -> Problems:
        """Filter out warning-level problems and recalculate stats."""
        filtered = Problems()
        for problem in problems.problems:
            if problem.level != ProblemLevel.WAR:
                filtered.append(problem)
        return filtered
