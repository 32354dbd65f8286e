"""
Diagnostics helpers for consistent, structured filter counters.
"""

from dataclasses import dataclass, field

FILTER_COUNTER_DEFAULTS: dict[str, int] = {
    "evaluated_count": 0,
    "matched_count": 0,
    "rejected_count": 0,
}


@dataclass
class Diagnostics:
    counters: dict[str, int] = field(default_factory=dict)

    def incr(self, key: str, amount: int = 1) -> None:
        self.counters[key] = int(self.counters.get(key, 0)) + amount

    def get(self, key: str, default: int = 0) -> int:
        return int(self.counters.get(key, default))

    def to_dict(self) -> dict[str, int]:
        return dict(self.counters)


class FilterDiagnostics(Diagnostics):
    @classmethod
    def create(cls) -> "FilterDiagnostics":
        return cls(counters=dict(FILTER_COUNTER_DEFAULTS))

    def record(self, matched: bool) -> None:
        self.incr("evaluated_count")
        self.incr("matched_count" if matched else "rejected_count")
