from __future__ import annotations

from dataclasses import dataclass, field

from ..writer import TraceWriter


@dataclass
class RuntimeContext:
    writer: TraceWriter = field(default_factory=TraceWriter)
