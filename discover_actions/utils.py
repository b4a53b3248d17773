import dataclasses
from datetime import datetime

from discover_actions.domain_model import MetadataRecord


def strip_token(record: MetadataRecord) -> MetadataRecord:
    """Remove the query string (and any token it carries) from a download URL.

    Returns a copy of ``record`` with everything from the first ``?`` of
    ``download_url`` dropped, or ``record`` itself when there is no URL.
    """
    if not record.download_url:
        return record
    url, _, _ = record.download_url.partition("?")
    return dataclasses.replace(record, download_url=url)


def format_timestamp(date: datetime) -> str:
    """Format a datetime as ``YYYYMMDD_HHmm`` for report file names."""
    return date.strftime("%Y%m%d_%H%M")
