from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple, Union

from logger import get_logger
from utils import EncodingResult, append_final_state, bits_from_string, bits_to_string, make_labels

log = get_logger(__name__)

Bits = Union[str, Sequence[int]]

# ---------- Encoding helpers (one signal sample per level) ----------

def _as_bits(data: Bits) -> List[int]:
    # Alphabet is checked by the caller (bits_from_string); here '1' is 1, anything else 0.
    if isinstance(data, str):
        return [1 if c == "1" else 0 for c in data]
    return [1 if b == 1 else 0 for b in data]


def nrzl_encode(data: Bits) -> List[int]:
    # 0 = low (0), 1 = high (1)
    return _as_bits(data)


def nrzi_encode(data: Bits, start_level: int = 0) -> List[int]:
    level = start_level
    out = []
    for b in _as_bits(data):
        if b == 1:
            level = 1 - level  # inversion encodes 1
        out.append(level)
    return out


def bipolar_ami_encode(data: Bits, last_pulse_init: int = -1) -> List[int]:
    last = last_pulse_init
    out = []
    for b in _as_bits(data):
        if b == 0:
            out.append(0)
        else:
            last *= -1
            out.append(last)
    return out


def pseudoternary_encode(data: Bits, last_zero_pulse_init: int = -1) -> List[int]:
    # Pseudoternary: 1 = 0 level, 0 = alternating +/- (successive zeros)
    last = last_zero_pulse_init
    out = []
    for b in _as_bits(data):
        if b == 1:
            out.append(0)
        else:
            last *= -1
            out.append(last)
    return out


def manchester_encode(data: Bits) -> List[int]:
    # 0 = high->low, 1 = low->high
    out = []
    for b in _as_bits(data):
        out.extend((0, 1) if b == 1 else (1, 0))
    return out


def differential_manchester_encode(data: Bits, start_level: int = 1) -> List[int]:
    level = start_level
    out = []
    # Convention: 0 => transition at start; 1 => no transition at start.
    for b in _as_bits(data):
        if b == 0:
            level = 1 - level
        out.append(level)
        level = 1 - level  # always mid-bit transition
        out.append(level)
    return out


# ---------- Scheme registry ----------

TERNARY = (-1, 0, 1)


@dataclass(frozen=True)
class Scheme:
    name: str
    encoder: Callable[[Bits], List[int]]
    double_rate: bool = False
    aliases: Tuple[str, ...] = ()
    levels: Tuple[int, ...] = (0, 1)


SCHEMES: Dict[str, Scheme] = {
    s.name: s
    for s in (
        Scheme("NRZ-L", nrzl_encode, aliases=("NRZL",)),
        Scheme("NRZ-I", nrzi_encode, aliases=("NRZI",)),
        Scheme("Bipolar AMI", bipolar_ami_encode, aliases=("Bipolar-AMI", "AMI"), levels=TERNARY),
        Scheme("Pseudoternary", pseudoternary_encode, levels=TERNARY),
        Scheme("Manchester", manchester_encode, double_rate=True),
        Scheme("Differential Manchester", differential_manchester_encode,
               double_rate=True, aliases=("DiffManchester",)),
    )
}


def _lookup_table() -> Dict[str, Scheme]:
    table: Dict[str, Scheme] = {}
    for scheme in SCHEMES.values():
        for key in (scheme.name,) + scheme.aliases:
            table[key.lower()] = scheme
    return table


_LOOKUP = _lookup_table()


def get_scheme(name: str) -> Scheme:
    scheme = _LOOKUP.get(name.strip().lower())
    if scheme is None:
        raise ValueError(f"Unknown scheme: {name}")
    return scheme


# ---------- Public API ----------

def encode(data: Bits, scheme: str, *, append_final: bool = False) -> List[int]:
    signal = get_scheme(scheme).encoder(data)
    if append_final:
        signal = append_final_state(signal)
    return signal


def encode_all(bitstr: str, *, append_final: bool = True) -> EncodingResult:
    bits = bits_from_string(bitstr)
    s = bits_to_string(bits)

    signals: Dict[str, List[int]] = {}
    labels: Dict[str, List[str]] = {}
    for name, scheme in SCHEMES.items():
        signals[name] = encode(bits, name, append_final=append_final)
        labels[name] = make_labels(s, double=scheme.double_rate, final_state=append_final)

    meta = {
        "append_final_state": append_final,
        "input_len": len(bits),
        "samples": {name: len(sig) for name, sig in signals.items()},
    }
    log.info("encoding_completed", input_len=len(bits), append_final_state=append_final)
    return EncodingResult(bitstr=s, signals=signals, labels=labels, meta=meta)
