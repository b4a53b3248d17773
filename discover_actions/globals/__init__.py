from .cli_config import CLIConfig
from .problems import Problem, ProblemLevel, Problems
from .process_stage import ProcessStage
from .scan_result import ScanResult
from .web_fetcher import IWebFetcher, WebFetcher

__all__ = [
    "CLIConfig",
    "Problem",
    "ProblemLevel",
    "Problems",
    "ProcessStage",
    "ScanResult",
    "IWebFetcher",
    "WebFetcher",
]
