import logging
from pathlib import Path
from typing import List, Optional, Sequence

from discover_actions.domain_model import ParsedManifest
from discover_actions.globals.problems import Problem, ProblemLevel, Problems
from discover_actions.globals.process_stage import ProcessStage
from discover_actions.pipeline_stages import discovery
from discover_actions.pipeline_stages.manifest_parser import ManifestParser

logger = logging.getLogger(__name__)


class ManifestReader(ProcessStage[Path, List[ParsedManifest]]):
    """Reads and parses every action manifest below a root, in path order.

    Every readable manifest yields exactly one ParsedManifest, malformed
    ones included. Unreadable files are reported and skipped.
    """

    RULE = "unreadable-file"

    def __init__(
        self,
        problems: Problems,
        repo: Optional[str] = None,
        paths: Optional[Sequence[Path]] = None,
    ) -> None:
        super().__init__(problems)
        self.parser = ManifestParser(problems, repo)
        self.paths = paths

    def process(self, root: Path) -> List[ParsedManifest]:
        paths = list(self.paths) if self.paths is not None else discovery.find_manifests(root)
        manifests: List[ParsedManifest] = []
        for path in paths:
            try:
                content = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.info(str(e))
                self.problems.append(
                    Problem(
                        desc=f"Could not read action file: {e}",
                        level=ProblemLevel.WAR,
                        rule=self.RULE,
                        file=path,
                    )
                )
                continue

            relative = discovery.relative_path(path, root)
            logger.info(f"Found action file [{relative}]")
            manifests.append(self.parser.parse(content, relative))
        return manifests
