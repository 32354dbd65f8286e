"""
Journal persistence.

Storage is kept out of ``Journal`` so the journal only manages entries. This
backend is a placeholder: it reports success without touching the filesystem.
"""

import logging

from .logging_config import audit_log
from .models.journal import Journal

logger = logging.getLogger(__name__)

SAVE_COMPLETED_MESSAGE = "Save is completed"


class Persistence:
    """Placeholder implementation of ``IJournalPersistence``."""

    def save_to_file(self, journal: Journal, filename: str, overwrite: bool = False) -> None:
        # No write happens: filename and overwrite are recorded, never acted on.
        logger.debug(
            "Save requested for %d entries to %s (overwrite=%s)", len(journal), filename, overwrite
        )
        audit_log(
            "Journal save requested",
            filename=filename,
            overwrite=overwrite,
            entries=len(journal),
        )
        print(SAVE_COMPLETED_MESSAGE)
