from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

DEFAULT_VALUE = "Undefined"
"""Placeholder used when a manifest field is absent or unparseable."""


@dataclass(frozen=True)
class MetadataRecord:
    """Metadata describing one action, produced by either extraction path.

    Records built from a YAML manifest always carry a sanitized value or
    ``DEFAULT_VALUE`` in their text fields. Records built from Dockerfile
    labels carry the raw label values and leave missing fields as ``None``.
    """

    name: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = None
    runtime_kind: Optional[str] = None
    """The ``runs.using`` value of a manifest, e.g. ``docker`` or ``node20``."""
    source_repo: Optional[str] = None
    download_url: Optional[str] = None
    path: Optional[str] = None
    """Location of the source file, relative to the scanned root."""
    extra_labels: Dict[str, str] = field(default_factory=dict, hash=False)
    """Label sub-keys without a dedicated field (``icon``, ``color``, ...).

    The record keeps its own copy; the mapping is left out of the hash.
    """

    def __post_init__(self):
        object.__setattr__(self, "extra_labels", dict(self.extra_labels))

    @classmethod
    def undefined(cls, path: Optional[str] = None) -> "MetadataRecord":
        """Record with every manifest field set to the sentinel default."""
        return cls(
            name=DEFAULT_VALUE,
            author=DEFAULT_VALUE,
            description=DEFAULT_VALUE,
            runtime_kind=DEFAULT_VALUE,
            path=path,
        )


@dataclass(frozen=True)
class ActionReference:
    """A step's ``uses: <action_id>@<ref>`` split into its two parts."""

    action_id: str
    ref: Optional[str] = None

    def __str__(self):
        if self.ref is None:
            return self.action_id
        return f"{self.action_id}@{self.ref}"


@dataclass(frozen=True)
class StepDecomposition:
    referenced_actions: Tuple[ActionReference, ...] = ()
    shell_steps: Tuple[Optional[str], ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "referenced_actions", tuple(self.referenced_actions))
        object.__setattr__(self, "shell_steps", tuple(self.shell_steps))


@dataclass(frozen=True)
class ParsedManifest:
    record: MetadataRecord
    steps: StepDecomposition = field(default_factory=StepDecomposition)
