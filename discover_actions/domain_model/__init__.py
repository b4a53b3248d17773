from .metadata import (
    DEFAULT_VALUE,
    ActionReference,
    MetadataRecord,
    ParsedManifest,
    StepDecomposition,
)

__all__ = [
    "DEFAULT_VALUE",
    "ActionReference",
    "MetadataRecord",
    "ParsedManifest",
    "StepDecomposition",
]
