"""
Modality of integer polynomials over an interval.

A polynomial is classified by counting its interior extrema on a closed interval [a, b], which are the points strictly
inside (a, b) where the derivative changes sign. Roots are isolated recursively: the points where q' changes sign cut
[a, b] into pieces on which q is monotone, so each piece contains at most one crossing of q, which is then found by
bisection.

Every sign is taken from the exact rational value of the integer polynomial at a float point (see
Polynomial.sign_at), never from a rounded evaluation, so a bracket really does contain a root. A root where q touches
zero without crossing is only reported when it falls exactly on a float. Since q keeps its sign across such a root,
missing it never changes the count of sign changes. The remaining limit is the bisection tolerance: a crossing of q
closer than tol to an extremum of q may be misplaced.

>>> find_prob_unimode(Polynomial(0, 1, -1))
Unimodal(mode=0.5)
>>> find_prob_unimode(Polynomial(0, 63, -150, 100))
Multimodal()
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Union

import numpy as np

from .poly import Polynomial

log = logging.getLogger(__name__)

# Bisection stops once the bracketing interval is narrower than this.
DEFAULT_TOLERANCE = 1e-12

# Upper bound on the number of halvings in a single bisection.
MAX_BISECTION_STEPS = 200


@dataclasses.dataclass(frozen=True)
class Unimodal:
    """Exactly one interior extremum, located at mode."""
    mode: float


@dataclasses.dataclass(frozen=True)
class Zero:
    """The polynomial is identically zero."""


@dataclasses.dataclass(frozen=True)
class Constant:
    """The polynomial is a nonzero constant."""


@dataclasses.dataclass(frozen=True)
class Nonmodal:
    """No interior extremum: the polynomial is monotone on the interval."""


@dataclasses.dataclass(frozen=True)
class Multimodal:
    """Two or more interior extrema."""


Modality = Union[Unimodal, Zero, Constant, Nonmodal, Multimodal]


def bisect_root(q: Polynomial, lo: float, hi: float, tol: float = DEFAULT_TOLERANCE) -> float:
    """
    Locate a root of q in the interval (lo, hi), where q(lo) and q(hi) are nonzero and of opposite signs. The interval
    is halved until it is narrower than tol, and the midpoint of the final interval is returned.

    >>> bisect_root(Polynomial(-1, 2), 0.0, 1.0)
    0.5
    """
    sign_lo = q.sign_at(lo)
    assert sign_lo != 0 and sign_lo == -q.sign_at(hi), f"[{lo}, {hi}] does not bracket a root of {q}"

    for _ in range(MAX_BISECTION_STEPS):
        if hi - lo < tol:
            break

        mid = (lo + hi) / 2
        sign_mid = q.sign_at(mid)
        if sign_mid == 0:
            return mid
        if sign_mid == sign_lo:
            lo = mid
        else:
            hi = mid
    else:
        log.debug("Bisection of %s stopped after %d steps at width %g", q, MAX_BISECTION_STEPS, hi - lo)

    return (lo + hi) / 2


def critical_points(q: Polynomial, a: float, b: float, tol: float = DEFAULT_TOLERANCE) -> list[float]:
    """
    Return the points strictly inside (a, b) where q crosses zero, in increasing order, together with any root lying
    exactly on a breakpoint, such as the touching root of 3(2x - 1)^2 at 1/2. Touching roots that floats cannot
    represent are not found. A constant or zero polynomial has no isolated roots, so gives the empty list.

    >>> critical_points(Polynomial(3, -12, 12), -1.0, 1.0)
    [0.5]
    """
    if a >= b or q.deg() <= 0:
        return []

    # Between consecutive breakpoints q is monotone.
    breaks = [a, *critical_points(q.differentiate(), a, b, tol), b]

    roots = []
    for lo, hi in zip(breaks, breaks[1:]):
        sign_lo, sign_hi = q.sign_at(lo), q.sign_at(hi)
        if sign_lo == 0:
            if lo != a:
                roots.append(lo)
        elif sign_lo * sign_hi < 0:
            roots.append(bisect_root(q, lo, hi, tol))

    return roots


def sign_changes(q: Polynomial, a: float, b: float, tol: float = DEFAULT_TOLERANCE) -> list[float]:
    """
    Return the points strictly inside (a, b) where q changes sign, in increasing order.

    >>> sign_changes(Polynomial(0, 0, 3), -1.0, 1.0)
    []
    >>> sign_changes(Polynomial(-1, 2), 0.0, 1.0)
    [0.5]
    """
    if a >= b or q.is_zero():
        return []

    # q does not cross zero between consecutive breakpoints, so its sign is constant on each piece and can be read off at
    # the midpoint.
    breaks = [a, *critical_points(q, a, b, tol), b]
    mids = (np.array(breaks[:-1]) + np.array(breaks[1:])) / 2
    signs = np.array([q.sign_at(mid) for mid in mids])

    nonzero = np.flatnonzero(signs)
    flips = nonzero[1:][np.diff(signs[nonzero]) != 0]
    return [breaks[i] for i in flips]


def find_modality(p: Polynomial, a: float, b: float, tol: float = DEFAULT_TOLERANCE) -> Modality:
    """
    Classify p by the number of its extrema strictly inside (a, b). An extremum sitting exactly on an endpoint is not
    counted, and an empty interval (a >= b) has no interior at all, so a nonconstant polynomial is Nonmodal there.

    >>> find_modality(Polynomial(), 0.0, 1.0)
    Zero()
    >>> find_modality(Polynomial(5), 0.0, 1.0)
    Constant()
    >>> find_modality(Polynomial(0, 0, 1), 0.0, 1.0)
    Nonmodal()
    >>> find_modality(Polynomial(0, 0, 1), -1.0, 1.0)
    Unimodal(mode=0.0)
    """
    if p.is_zero():
        return Zero()

    dp = p.differentiate()
    if dp.is_zero():
        return Constant()

    if a >= b:
        log.debug("Empty interior for interval [%s, %s], treating %s as nonmodal", a, b, p)
        return Nonmodal()

    extrema = sign_changes(dp, a, b, tol)
    log.debug("%s has %d extrema in (%s, %s)", p, len(extrema), a, b)

    if len(extrema) == 0:
        return Nonmodal()
    if len(extrema) == 1:
        return Unimodal(extrema[0])
    return Multimodal()


def find_prob_unimode(p: Polynomial, tol: float = DEFAULT_TOLERANCE) -> Modality:
    """Classify p over the unit interval, where probability generating functions live."""
    return find_modality(p, 0.0, 1.0, tol)
