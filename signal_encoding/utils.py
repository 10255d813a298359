from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence
import numpy as np

EMPTY_INPUT_MSG = "Please enter a valid binary sequence using only 0s and 1s."
NON_BINARY_MSG = "Input must contain only binary digits (0 or 1)."


@dataclass
class EncodingResult:
    bitstr: str
    signals: Dict[str, List[int]]      # scheme name -> levels
    labels: Dict[str, List[str]]       # scheme name -> x-axis labels
    meta: Dict[str, Any] = field(default_factory=dict)


def bits_from_string(bitstr: str) -> List[int]:
    s = bitstr.strip()
    if not s:
        raise ValueError(EMPTY_INPUT_MSG)
    if any(c not in "01" for c in s):
        raise ValueError(NON_BINARY_MSG)
    return [1 if c == "1" else 0 for c in s]


def bits_to_string(bits: Sequence[int]) -> str:
    return "".join("1" if b else "0" for b in bits)


def is_binary_draft(text: str) -> bool:
    # Drafts may be empty while typing; only the alphabet is checked.
    return all(c in "01" for c in text.strip())


def gen_random_bits(n: int, seed: Optional[int] = None) -> List[int]:
    rng = np.random.default_rng(seed)
    return [int(x) for x in rng.integers(0, 2, size=n)]


def append_final_state(signal: Sequence[int]) -> List[int]:
    """Repeat the last level once so a stepped chart draws the final segment."""
    out = list(signal)
    if out:
        out.append(out[-1])
    return out


def make_labels(bitstr: str, double: bool = False, final_state: bool = True) -> List[str]:
    labels = list(bitstr)
    if final_state:
        labels.append("")
    if double:
        # Manchester-family: label sits on the first half, blank on the second.
        return [x for bit in labels for x in (bit, "")]
    return labels
