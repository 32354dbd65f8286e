"""
Journal Domain Model

Holds journal entries and nothing else. Saving and loading belong to a separate
persistence component (see ``design_kata.persistence``).
"""

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class Journal:
    """
    Ordered, mutable list of text entries.

    ``count`` tracks how many entries were ever added. Removing an entry does not
    decrement it.
    """

    entries: list[str] = field(default_factory=list)
    count: int = 0

    def add_entry(self, text: str) -> int:
        self.count += 1
        self.entries.append(text)
        return self.count

    def remove(self, index: int) -> None:
        """Remove the entry at ``index``; out-of-range positions are ignored."""
        if not 0 <= index < len(self.entries):
            logger.debug("Ignoring remove(%d): journal has %d entries", index, len(self.entries))
            return
        del self.entries[index]

    def render(self) -> str:
        return "\n".join(self.entries)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.entries)
