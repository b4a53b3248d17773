from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from discover_actions.globals.problems import Problems

I = TypeVar("I")  # noqa: E741
O = TypeVar("O")  # noqa: E741


class ProcessStage(ABC, Generic[I, O]):
    """A pipeline stage turning an input into an output.

    Stages report diagnostics into the shared ``problems`` collection
    instead of raising.
    """

    def __init__(self, problems: Problems) -> None:
        self.problems = problems

    @abstractmethod
    def process(self, data: I) -> O:
        pass
