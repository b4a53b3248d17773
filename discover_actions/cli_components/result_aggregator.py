from abc import ABC, abstractmethod
from typing import List

from discover_actions.globals.problems import ProblemLevel
from discover_actions.globals.scan_result import ScanResult


class ResultAggregator(ABC):
    """Interface for aggregating scan results across multiple roots."""

    @abstractmethod
    def add_result(self, result: ScanResult) -> None:
        """Add a scan result to the aggregation."""
        pass

    @abstractmethod
    def get_total_actions(self) -> int:
        pass

    @abstractmethod
    def get_total_errors(self) -> int:
        pass

    @abstractmethod
    def get_total_warnings(self) -> int:
        pass

    @abstractmethod
    def get_max_level(self) -> ProblemLevel:
        """Get the highest problem level encountered."""
        pass

    @abstractmethod
    def get_exit_code(self) -> int:
        """Get appropriate exit code based on results."""
        pass

    @abstractmethod
    def get_results(self) -> List[ScanResult]:
        pass


class StandardResultAggregator(ResultAggregator):
    """
    Standard implementation of result aggregation.

    Tracks total actions, errors and warnings, and determines exit codes.
    Exit codes: 0=success, 1=errors present, 2=warnings only.
    """

    def __init__(self) -> None:
        self._results: List[ScanResult] = []
        self._total_actions = 0
        self._total_errors = 0
        self._total_warnings = 0
        self._max_level = ProblemLevel.NON

    def add_result(self, result: ScanResult) -> None:
        """Add a scan result and update aggregated stats."""
        self._results.append(result)
        self._total_actions += result.action_count
        self._total_errors += result.problems.n_error
        self._total_warnings += result.problems.n_warning
        self._max_level = ProblemLevel(
            max(self._max_level.value, result.problems.max_level.value)
        )

    def get_total_actions(self) -> int:
        return self._total_actions

    def get_total_errors(self) -> int:
        return self._total_errors

    def get_total_warnings(self) -> int:
        return self._total_warnings

    def get_max_level(self) -> ProblemLevel:
        return self._max_level

    def get_exit_code(self) -> int:
        """Get exit code based on problem levels."""
        match self._max_level:
            case ProblemLevel.NON:
                return 0
            case ProblemLevel.WAR:
                return 2
            case ProblemLevel.ERR:
                return 1
            case _:
                raise ValueError(f"Invalid problem level: {self._max_level}")

    def get_results(self) -> List[ScanResult]:
        """Get all scan results."""
        return self._results.copy()
