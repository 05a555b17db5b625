"""Splits raw input text into the lines that become subtitle cues."""

from typing import List

def split_lines(raw: str) -> List[str]:
    """
    Returns the non-blank lines of `raw`, in their original order.

    A line is blank when it is empty after stripping whitespace. Kept
    lines are returned exactly as they appear in the input; stripping
    is only used for the blank test.
    """
    if not raw:
        return []
    return [line for line in raw.split("\n") if line.strip()]
