"""
deathday.engines.distribution
-----------------------------
Curves mapping an identity onto a number of years left to live.

Every curve takes ``(identity, span)`` with ``span >= 1`` and returns an
integer in ``[1, span]``.
"""

from __future__ import annotations

from typing import Dict, List, Protocol

from ..core.errors import ProfileError, UnknownDistributionError


class YearsCurve(Protocol):
    def __call__(self, identity: int, span: int) -> int: ...


def _check_span(span: int) -> None:
    if span < 1:
        raise ProfileError(f"years span must be positive, got {span}")


def linear_years(identity: int, span: int) -> int:
    """Uniform over [1, span]."""
    _check_span(span)
    return identity % span + 1


# Horizontal stretch of the exponential curve.
EXP_STRETCH = 100


def exponential_years(identity: int, span: int) -> int:
    """
    Smaller values come up more often than larger ones.

    f(x) = base**x with base**0 = 1 and base**(span * k) = span,
    sampled at x = identity mod (span * k).
    """
    _check_span(span)
    steps = span * EXP_STRETCH
    base = span ** (1.0 / steps)
    x = identity % steps
    return min(max(int(base ** x), 1), span)


DEFAULT_DISTRIBUTION = "linear"

_CURVES: Dict[str, YearsCurve] = {
    "linear": linear_years,
    "exponential": exponential_years,
}


def get_distribution(name: str) -> YearsCurve:
    try:
        return _CURVES[name]
    except KeyError:
        raise UnknownDistributionError(
            f"no distribution named '{name}', choose one of: {', '.join(list_distributions())}"
        ) from None

def list_distributions() -> List[str]:
    return sorted(_CURVES)

def register_distribution(name: str, curve: YearsCurve, *, replace: bool = False) -> None:
    """Makes ``curve`` available to predictions under ``name``."""
    if not callable(curve):
        raise TypeError(f"distribution '{name}' must be callable as curve(identity, span)")
    if name in _CURVES and not replace:
        raise ValueError(f"distribution '{name}' is taken; pass replace=True to swap it")
    _CURVES[name] = curve
