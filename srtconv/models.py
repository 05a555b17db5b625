"""Data models for srtconv."""

from dataclasses import dataclass, field
from typing import List

@dataclass(frozen=True)
class Cue:
    """A single timed subtitle entry."""
    index: int # 1-based
    start_time: float
    end_time: float
    text: str

@dataclass
class ConversionResult:
    """Holds the output of one text-to-SRT conversion."""
    total_seconds: float
    cues: List[Cue] = field(default_factory=list)
    output_text: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.cues
