"""
Single Responsibility demonstration.

The journal manages entries; saving is delegated to a persistence backend
passed in from outside.
"""

from typing import Optional

from .config_loader import DEFAULT_RUNTIME_CONFIG
from .interfaces import IJournalPersistence
from .models.journal import Journal
from .persistence import Persistence

DEFAULT_FILENAME = DEFAULT_RUNTIME_CONFIG["journal"]["filename"]


def run_journal_demo(
    filename: str = DEFAULT_FILENAME,
    overwrite: bool = False,
    persistence: Optional[IJournalPersistence] = None,
) -> Journal:
    journal = Journal()
    journal.add_entry("first")
    journal.add_entry("second")
    print(journal)

    journal.remove(1)
    print(journal)

    store = persistence if persistence is not None else Persistence()
    store.save_to_file(journal, filename, overwrite)
    return journal


if __name__ == "__main__":
    run_journal_demo()
