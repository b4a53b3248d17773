import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from discover_actions.domain_model import (
    DEFAULT_VALUE,
    MetadataRecord,
    ParsedManifest,
    StepDecomposition,
)
from discover_actions.globals.problems import Problem, ProblemLevel, Problems
from discover_actions.pipeline_stages.extractor import MetadataExtractor
from discover_actions.pipeline_stages.sanitizer import sanitize
from discover_actions.pipeline_stages.step_classifier import decompose_steps

logger = logging.getLogger(__name__)


class ManifestParser(MetadataExtractor):
    """Reads the metadata of an ``action.yml`` / ``action.yaml`` manifest.

    Only ``name``, ``author``, ``description``, ``runs.using`` and
    ``runs.steps`` are looked at. Invalid YAML never raises: it is reported
    as a warning and yields a record where every field is ``DEFAULT_VALUE``.
    """

    RULE = "manifest-syntax"

    def __init__(self, problems: Optional[Problems] = None, repo: Optional[str] = None) -> None:
        """
        Args:
            problems: Collection receiving a warning for each malformed manifest.
            repo: Identifier of the repository the manifests come from,
                included in diagnostics.
        """
        self.problems = problems
        self.repo = repo

    def extract(self, content: str, path: Optional[str] = None) -> MetadataRecord:
        return self.parse(content, path).record

    def parse(self, content: str, path: Optional[str] = None) -> ParsedManifest:
        """Parse manifest content into its record and step decomposition.

        Args:
            content: YAML text of the manifest.
            path: Location of the manifest, used in the record and in
                diagnostics.

        Returns:
            ParsedManifest: The record and the manifest's steps split into
                referenced actions and shell steps.
        """
        try:
            parsed = yaml.safe_load(content)
        except yaml.YAMLError as e:
            self._report_malformed(path, str(e))
            return ParsedManifest(record=MetadataRecord.undefined(path))

        if parsed is None:
            parsed = {}
        if not isinstance(parsed, dict):
            self._report_malformed(path, f"expected a mapping, got {type(parsed).__name__}")
            return ParsedManifest(record=MetadataRecord.undefined(path))

        runs = parsed.get("runs")
        if not isinstance(runs, dict):
            runs = {}

        record = MetadataRecord(
            name=self._field(parsed, "name"),
            author=self._field(parsed, "author"),
            description=self._field(parsed, "description"),
            # independent of description: no runs.using means the sentinel
            runtime_kind=self._field(runs, "using"),
            path=path,
        )
        steps = decompose_steps(runs.get("steps")) if runs else StepDecomposition()
        return ParsedManifest(record=record, steps=steps)

    @staticmethod
    def _field(mapping: Dict[str, Any], key: str) -> str:
        """Sanitized value of ``mapping[key]``, or the sentinel default."""
        value = mapping.get(key)
        if not value:
            return DEFAULT_VALUE
        return sanitize(value) or DEFAULT_VALUE

    def _report_malformed(self, path: Optional[str], error: str) -> None:
        logger.warning(
            f"Error parsing action file [{path}] in repo [{self.repo}] with error: {error}"
        )
        logger.info("The parsing error is informational, searching for actions has continued")
        if self.problems is not None:
            self.problems.append(
                Problem(
                    desc=f"Error parsing action file: {error}",
                    level=ProblemLevel.WAR,
                    rule=self.RULE,
                    file=Path(path) if path else None,
                )
            )


def parse_manifest(
    content: str, path: Optional[str] = None, repo: Optional[str] = None
) -> ParsedManifest:
    """Parse manifest content without collecting problems.

    Example:
        >>> manifest = parse_manifest("name: My Action!\\nruns:\\n  using: node20\\n")
        >>> manifest.record.name, manifest.record.runtime_kind
        ('My Action', 'node20')
    """
    return ManifestParser(repo=repo).parse(content, path)
