from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from discover_actions.domain_model import MetadataRecord, ParsedManifest
from discover_actions.globals.problems import Problems


@dataclass
class ScanResult:
    """Everything found while scanning a single root directory."""

    root: Path
    manifests: List[ParsedManifest] = field(default_factory=list)
    docker_actions: List[MetadataRecord] = field(default_factory=list)
    problems: Problems = field(default_factory=Problems)
    readme: Optional[str] = None

    @property
    def action_count(self) -> int:
        return len(self.manifests) + len(self.docker_actions)

    @property
    def records(self) -> List[MetadataRecord]:
        """All records of the scan, manifest-derived first."""
        return [manifest.record for manifest in self.manifests] + list(self.docker_actions)
