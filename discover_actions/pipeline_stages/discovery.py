import os
from pathlib import Path
from typing import Iterable, List

MANIFEST_NAMES = ("action.yml", "action.yaml")
DOCKERFILE_NAMES = ("Dockerfile", "dockerfile")
SKIPPED_DIRS = (".git",)


def find_manifests(root: Path) -> List[Path]:
    """Find all action manifests below ``root``, sorted by path."""
    return _find_files(root, MANIFEST_NAMES)


def find_dockerfiles(root: Path) -> List[Path]:
    """Find all files named ``Dockerfile`` or ``dockerfile`` below ``root``."""
    return _find_files(root, DOCKERFILE_NAMES)


def _find_files(root: Path, names: Iterable[str]) -> List[Path]:
    names = set(names)
    found: List[Path] = []
    for directory, subdirs, files in os.walk(root):
        subdirs[:] = [d for d in subdirs if d not in SKIPPED_DIRS]
        for file in files:
            if file in names:
                found.append(Path(directory) / file)
    return sorted(found)


def relative_path(path: Path, root: Path) -> str:
    """Path of ``path`` relative to ``root``, or unchanged if outside of it."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()
