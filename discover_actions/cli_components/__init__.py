from .output_formatter import ColoredFormatter, OutputFormatter
from .report_writer import ReportWriter
from .result_aggregator import ResultAggregator, StandardResultAggregator
from .scan_service import ScanService, StandardScanService

__all__ = [
    "ColoredFormatter",
    "OutputFormatter",
    "ReportWriter",
    "ResultAggregator",
    "StandardResultAggregator",
    "ScanService",
    "StandardScanService",
]
