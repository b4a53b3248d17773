from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class CLIConfig:
    """
    Configuration for CLI operations.

    Attributes:
        roots: Directories to scan for action manifests and Dockerfiles
        repository: Identifier (``owner/name``) of the repository being scanned
        github_token: GitHub token for API access, or None for no authentication
        fetch_readme: Whether to fetch the repository README from the GitHub API
        output: Path of the JSON report to write, or None to skip the report
        max_workers: Upper bound on concurrently processed Dockerfiles
        quiet: Whether to suppress warning-level problems in output
        verbose: Whether to emit debug logging
    """

    roots: List[str] = field(default_factory=lambda: ["."])
    repository: Optional[str] = None
    github_token: Optional[str] = None
    fetch_readme: bool = False
    output: Optional[str] = None
    max_workers: int = 8
    quiet: bool = False
    verbose: bool = False
