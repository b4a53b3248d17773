"""Pipeline stages extracting action metadata from manifests and Dockerfiles."""

from .dockerfile_extractor import DockerfileExtractor, DockerLabelExtractor, extract_from_dockerfiles
from .extractor import MetadataExtractor
from .manifest_parser import ManifestParser, parse_manifest
from .manifest_reader import ManifestReader
from .sanitizer import sanitize
from .step_classifier import StepKind, classify_step, decompose_steps, split_uses

__all__ = [
    "DockerfileExtractor",
    "DockerLabelExtractor",
    "extract_from_dockerfiles",
    "MetadataExtractor",
    "ManifestParser",
    "parse_manifest",
    "ManifestReader",
    "sanitize",
    "StepKind",
    "classify_step",
    "decompose_steps",
    "split_uses",
]
