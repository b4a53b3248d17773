from abc import ABC, abstractmethod
from typing import Optional

from discover_actions.domain_model import MetadataRecord


class MetadataExtractor(ABC):
    """Produces a MetadataRecord from the text of one source file.

    Implementations differ in how they treat missing and unsafe values:

    - ``ManifestParser`` sanitizes every text field and substitutes
      ``DEFAULT_VALUE`` for missing ones. It always returns a record.
    - ``DockerLabelExtractor`` keeps label values verbatim, leaves missing
      fields as ``None`` and returns None for files that do not describe an
      action.
    """

    @abstractmethod
    def extract(self, content: str, path: Optional[str] = None) -> Optional[MetadataRecord]:
        """Build a record from ``content``.

        Args:
            content: Full text of the source file.
            path: Location of the file, relative to the scanned root.

        Returns:
            The record, or None if the content does not describe an action.
        """
        pass
