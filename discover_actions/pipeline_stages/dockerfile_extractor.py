import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from discover_actions.domain_model import MetadataRecord
from discover_actions.globals.problems import Problem, ProblemLevel, Problems
from discover_actions.globals.process_stage import ProcessStage
from discover_actions.pipeline_stages import discovery
from discover_actions.pipeline_stages.extractor import MetadataExtractor

logger = logging.getLogger(__name__)

LABEL_PREFIX = "LABEL com.github.actions."
RECORD_FIELDS = ("name", "description", "author")


class DockerLabelExtractor(MetadataExtractor):
    """Reads action metadata from ``LABEL com.github.actions.*`` directives.

    A Dockerfile counts as an action only if it declares both the ``name``
    and the ``description`` label. Label values are taken verbatim: no
    sanitizing and no defaults.
    """

    def __init__(self, repo: Optional[str] = None) -> None:
        self.repo = repo

    def is_actionable(self, content: str) -> bool:
        return f"{LABEL_PREFIX}name=" in content and f"{LABEL_PREFIX}description=" in content

    def extract(self, content: str, path: Optional[str] = None) -> Optional[MetadataRecord]:
        if not self.is_actionable(content):
            return None

        labels = self.parse_labels(content)
        fields = {key: labels.pop(key) for key in RECORD_FIELDS if key in labels}
        return MetadataRecord(
            **fields,
            source_repo=self.repo,
            path=path,
            extra_labels=labels,
        )

    @staticmethod
    def parse_labels(content: str) -> Dict[str, str]:
        """Map each label sub-key to its quoted value.

        ``LABEL com.github.actions.name="Foo"`` yields ``{"name": "Foo"}``.
        Lines without a quoted value are skipped.
        """
        labels: Dict[str, str] = {}
        for line in content.splitlines():
            if not line.startswith(LABEL_PREFIX):
                continue
            segments = line.split(".")
            quoted = line.split('"')
            if len(segments) < 4 or len(quoted) < 3:
                continue
            key = segments[3].split("=")[0].strip()
            if key:
                labels[key] = quoted[1]
        return labels


class DockerfileExtractor(ProcessStage[Path, List[MetadataRecord]]):
    """Scans every Dockerfile below a root for label-based actions.

    Files are read and parsed concurrently on a bounded thread pool. The
    returned list has no defined order.
    """

    RULE = "unreadable-file"

    def __init__(
        self,
        problems: Problems,
        repo: Optional[str] = None,
        max_workers: int = 8,
        paths: Optional[Sequence[Path]] = None,
    ) -> None:
        """
        Args:
            problems: Collection receiving a warning for each unreadable file.
            repo: Repository identifier stored in each record's ``source_repo``.
            max_workers: Upper bound on files processed at once.
            paths: Dockerfiles to scan. Discovered below the root if None.
        """
        super().__init__(problems)
        self.extractor = DockerLabelExtractor(repo)
        self.max_workers = max_workers
        self.paths = paths

    def process(self, root: Path) -> List[MetadataRecord]:
        paths = list(self.paths) if self.paths is not None else discovery.find_dockerfiles(root)
        records: List[MetadataRecord] = []
        if not paths:
            return records

        with ThreadPoolExecutor(max_workers=max(1, self.max_workers)) as executor:
            futures = [executor.submit(self._process_file, path, root) for path in paths]
            for future in as_completed(futures):
                record, problem = future.result()
                if problem is not None:
                    self.problems.append(problem)
                if record is not None:
                    records.append(record)
        return records

    def _process_file(
        self, path: Path, root: Path
    ) -> Tuple[Optional[MetadataRecord], Optional[Problem]]:
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.info(str(e))
            return None, Problem(
                desc=f"Could not read Dockerfile: {e}",
                level=ProblemLevel.WAR,
                rule=self.RULE,
                file=path,
            )

        relative = discovery.relative_path(path, root)
        record = self.extractor.extract(content, relative)
        if record is not None:
            logger.info(f"[{relative}] has dockerfile as an action!")
        return record, None


def extract_from_dockerfiles(
    root: Path,
    paths: Optional[Sequence[Path]] = None,
    repo: Optional[str] = None,
    max_workers: int = 8,
) -> List[MetadataRecord]:
    """Label-based records for all actionable Dockerfiles below ``root``."""
    return DockerfileExtractor(Problems(), repo, max_workers, paths).process(Path(root))
