# File: primersites/app/core/binding/thermodynamics.py
# Version: v0.2.0
"""
Thermodynamic properties of a primer's binding region.

Implements:
- GC percentage
- 3' end stability: |dG37| (kcal/mol) of the last five bases, summed over the
  SantaLucia (1998) nearest-neighbour stacks shipped with BioPython
- Tm calculators (BioPython MeltingTemp): nearest-neighbour, Wallace rule,
  GC-content formula

Calculators raise on sequences they cannot handle (ambiguous bases, too
short); callers decide how to degrade.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from Bio.SeqUtils import MeltingTemp as mt

from .constants import END_STABILITY_WINDOW
from .sequence import complement

TmCalculator = Callable[[str], float]

# Body temperature used for dG = dH - T*dS
_T37_KELVIN = 310.15


def gc_percent(seq: str) -> float:
    if not seq:
        return 0.0
    s = seq.upper()
    gc = s.count("G") + s.count("C")
    return 100.0 * gc / len(s)


def _stack_dg(pair: str) -> float:
    key = f"{pair}/{complement(pair)}"
    if key in mt.DNA_NN3:
        dh, ds = mt.DNA_NN3[key]
    elif key[::-1] in mt.DNA_NN3:
        dh, ds = mt.DNA_NN3[key[::-1]]
    else:
        raise ValueError(f"No nearest-neighbour parameters for {pair!r}")
    return dh - _T37_KELVIN * ds / 1000.0


def end_stability(seq: str, window: int = END_STABILITY_WINDOW) -> float:
    """
    3' end stability of `seq` (kcal/mol, positive; larger is more stable).

    Uses the last `window` bases (or the whole sequence if shorter).

    Raises:
        ValueError: fewer than two bases, or a dinucleotide outside A/C/G/T.
    """
    tail = seq.upper()[-window:]
    if len(tail) < 2:
        raise ValueError("End stability needs at least two bases")
    dg = sum(_stack_dg(tail[i : i + 2]) for i in range(len(tail) - 1))
    return round(abs(dg), 2)


def tm_nearest_neighbor(seq: str, Na: float = 50.0, divalent: float = 0.0, dntp: float = 0.0, dna_conc: float = 250.0) -> float:
    """
    Melting temperature using the NN method (°C).

    Args:
        seq: primer sequence (A/C/G/T)
        Na: monovalent salt concentration (mM)
        divalent: divalent salt (mM)
        dntp: dNTP concentration (mM)
        dna_conc: primer strand concentration (nM)
    """
    return float(mt.Tm_NN(seq, Na=Na, Mg=divalent, dNTPs=dntp, dnac1=dna_conc, dnac2=dna_conc))


def tm_wallace(seq: str) -> float:
    """Wallace rule (°C): 2*(A+T) + 4*(G+C)."""
    return float(mt.Tm_Wallace(seq))


def tm_gc(seq: str) -> float:
    return float(mt.Tm_GC(seq, Na=50))


TM_METHODS: Dict[str, TmCalculator] = {
    "nn": tm_nearest_neighbor,
    "wallace": tm_wallace,
    "gc": tm_gc,
}


def get_tm_calculator(method: Optional[str]) -> Optional[TmCalculator]:
    """Return the calculator registered under `method`; None/'none' disables Tm."""
    if method is None or method == "none":
        return None
    try:
        return TM_METHODS[method]
    except KeyError:
        raise ValueError(f"Unknown Tm method {method!r}; expected one of {sorted(TM_METHODS)} or 'none'") from None
