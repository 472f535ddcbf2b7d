import threading
from dataclasses import dataclass, field
from typing import Dict

from .models import BodyOutcome, ParsedRequest

@dataclass
class Stats:
    total: int = 0
    parsed: int = 0
    failed: int = 0
    with_body: int = 0
    unparseable_body: int = 0
    with_query: int = 0
    methods: Dict[str, int] = field(default_factory=dict)

class Metrics:
    def __init__(self):
        self._lock = threading.Lock()
        self.stats = Stats()

    def record_parsed(self, parsed: ParsedRequest):
        with self._lock:
            self.stats.total += 1
            self.stats.parsed += 1
            if parsed.body_outcome is BodyOutcome.DECODED:
                self.stats.with_body += 1
            elif parsed.body_outcome is BodyOutcome.FAILED:
                self.stats.unparseable_body += 1
            if parsed.query is not None:
                self.stats.with_query += 1

            # An empty method means the file held no request line at all.
            method = parsed.method or "-"
            self.stats.methods[method] = self.stats.methods.get(method, 0) + 1

    def record_error(self):
        with self._lock:
            self.stats.total += 1
            self.stats.failed += 1
