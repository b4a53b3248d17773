from abc import abstractmethod
from pathlib import Path
from typing import Optional

from discover_actions import pipeline_stages
from discover_actions.globals.problems import Problem, ProblemLevel, Problems
from discover_actions.globals.process_stage import ProcessStage
from discover_actions.globals.scan_result import ScanResult


class IPipeline(ProcessStage[Path, ScanResult]):
    """
    Interface for scan pipelines.

    Classes implementing this interface scan a root directory and return
    every action found in it together with the problems met on the way.
    """

    def __init__(self) -> None:
        super().__init__(Problems())

    @abstractmethod
    def process(self, root: Path) -> ScanResult:
        """
        Scan a root directory for actions.

        Args:
            root (Path): Directory to scan.

        Returns:
            ScanResult: Manifests, label-based actions and problems found.
        """
        pass


class Pipeline(IPipeline):
    RULE = "scan-root"

    def __init__(self, repo: Optional[str] = None, max_workers: int = 8) -> None:
        super().__init__()
        self.repo = repo

        self.manifest_reader = pipeline_stages.ManifestReader(self.problems, repo)
        self.dockerfile_extractor = pipeline_stages.DockerfileExtractor(
            self.problems, repo, max_workers
        )

    def process(self, root: Path) -> ScanResult:
        if not root.is_dir():
            self.problems.append(
                Problem(
                    desc=f"{root} is not a directory",
                    level=ProblemLevel.ERR,
                    rule=self.RULE,
                    file=root,
                )
            )
            return ScanResult(root=root, problems=self.problems)

        manifests = self.manifest_reader.process(root)
        docker_actions = self.dockerfile_extractor.process(root)
        return ScanResult(
            root=root,
            manifests=manifests,
            docker_actions=docker_actions,
            problems=self.problems,
        )
