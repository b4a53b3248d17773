from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional


class ProblemLevel(Enum):
    NON = 0
    WAR = 1
    ERR = 2


@dataclass
class Problem:
    """A diagnostic raised while scanning a file.

    Attributes:
        desc: Human-readable description of the problem
        level: Severity of the problem
        rule: Identifier of the check that raised it
        file: File the problem relates to, if any
    """

    desc: str
    level: ProblemLevel
    rule: str
    file: Optional[Path] = None


class Problems:
    """Collection of problems with running severity statistics."""

    def __init__(self) -> None:
        self.problems: List[Problem] = []
        self.max_level: ProblemLevel = ProblemLevel.NON
        self.n_error: int = 0
        self.n_warning: int = 0

    def append(self, problem: Problem) -> None:
        self.problems.append(problem)
        self.max_level = ProblemLevel(max(self.max_level.value, problem.level.value))
        if problem.level == ProblemLevel.ERR:
            self.n_error += 1
        elif problem.level == ProblemLevel.WAR:
            self.n_warning += 1

    def extend(self, problems: Iterable[Problem]) -> None:
        for problem in problems:
            self.append(problem)

    def sort(self) -> None:
        """Order problems by file, then by descending severity."""
        self.problems.sort(key=lambda p: (str(p.file or ""), -p.level.value))

    def __len__(self) -> int:
        return len(self.problems)
