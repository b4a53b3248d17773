"""discover-actions: find GitHub Actions and normalize their metadata.

Actions are described either by an ``action.yml`` manifest or by
``LABEL com.github.actions.*`` directives in a Dockerfile. Both are turned
into the same MetadataRecord. Manifests additionally yield the actions
their steps reference and the shell steps they run.

Example:
    CLI usage:
        $ discover-actions                       # Scan the current directory
        $ discover-actions path/to/repo -o out/  # Scan a checkout, write a report

    Library usage:
        from discover_actions import parse_manifest, scan

        manifest = parse_manifest(open("action.yml").read(), "action.yml")
        for action in manifest.steps.referenced_actions:
            print(action.action_id, action.ref)
"""

from pathlib import Path
from typing import Optional

from .cli import CLI, StandardCLI
from .domain_model import (
    DEFAULT_VALUE,
    ActionReference,
    MetadataRecord,
    ParsedManifest,
    StepDecomposition,
)
from .globals import Problem, ProblemLevel, Problems, ScanResult
from .pipeline import IPipeline, Pipeline
from .pipeline_stages import extract_from_dockerfiles, parse_manifest, sanitize
from .utils import format_timestamp, strip_token


def scan(root: str, repo: Optional[str] = None, max_workers: int = 8) -> ScanResult:
    """Scan a directory for manifest- and label-based actions.

    Args:
        root: Directory to scan
        repo: Repository identifier stored on label-based records

    Returns:
        ScanResult: The actions found and the problems met
    """
    return Pipeline(repo=repo, max_workers=max_workers).process(Path(root))


__all__ = [
    "scan",
    "parse_manifest",
    "extract_from_dockerfiles",
    "sanitize",
    "strip_token",
    "format_timestamp",
    # Core types
    "DEFAULT_VALUE",
    "ActionReference",
    "MetadataRecord",
    "ParsedManifest",
    "StepDecomposition",
    "Problem",
    "ProblemLevel",
    "Problems",
    "ScanResult",
    # CLI interface
    "CLI",
    "StandardCLI",
    # Pipeline
    "IPipeline",
    "Pipeline",
]
