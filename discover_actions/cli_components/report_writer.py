import dataclasses
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from discover_actions.globals.scan_result import ScanResult
from discover_actions.utils import format_timestamp, strip_token


class ReportWriter:
    """Writes scan results to a JSON report.

    If the target is a directory, or a path without a file suffix, the
    report is named ``actions_<YYYYMMDD_HHmm>.json`` inside it. Missing
    directories are created.
    """

    def __init__(self, target: Path, now: Optional[datetime] = None) -> None:
        self.target = target
        self.now = now

    def report_path(self) -> Path:
        if self.target.is_dir() or not self.target.suffix:
            timestamp = format_timestamp(self.now or datetime.now())
            return self.target / f"actions_{timestamp}.json"
        return self.target

    def write(self, results: List[ScanResult]) -> Path:
        path = self.report_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump([self._serialize(result) for result in results], f, indent=2)
        return path

    def _serialize(self, result: ScanResult) -> Dict[str, Any]:
        return {
            "root": str(result.root),
            "readme": result.readme,
            "manifests": [
                {
                    **dataclasses.asdict(strip_token(manifest.record)),
                    "steps": dataclasses.asdict(manifest.steps),
                }
                for manifest in result.manifests
            ],
            "dockerfiles": [
                dataclasses.asdict(strip_token(record)) for record in result.docker_actions
            ],
            "problems": [
                {
                    "file": str(problem.file) if problem.file else None,
                    "level": problem.level.name,
                    "rule": problem.rule,
                    "desc": problem.desc,
                }
                for problem in result.problems.problems
            ],
        }
