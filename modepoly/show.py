"""
Show is a module of pure display mappings for modality classifications: short codes for tables, longer descriptions
for humans, and a pandas summary of a batch of polynomials.
"""
from typing import Iterable

import numpy as np
import pandas as pd

from .modality import Constant, Modality, Multimodal, Nonmodal, Unimodal, Zero, find_modality
from .poly import Polynomial


def four_letter_code(modality: Modality) -> str:
    """
    A fixed-width code for each kind of classification.

    >>> [four_letter_code(m) for m in (Unimodal(0.5), Zero(), Constant(), Nonmodal(), Multimodal())]
    [' :) ', 'zero', 'cons', 'none', 'mult']
    """
    if isinstance(modality, Unimodal):
        return ' :) '
    if isinstance(modality, Zero):
        return 'zero'
    if isinstance(modality, Constant):
        return 'cons'
    if isinstance(modality, Nonmodal):
        return 'none'
    if isinstance(modality, Multimodal):
        return 'mult'
    raise ValueError(f"{modality!r} is not a modality")


def describe(modality: Modality) -> str:
    """
    >>> describe(Unimodal(0.25))
    'Unimodal(0.25)'
    >>> describe(Nonmodal())
    'Without extrema'
    """
    if isinstance(modality, Unimodal):
        return f'Unimodal({modality.mode})'
    if isinstance(modality, Zero):
        return 'Identically zero'
    if isinstance(modality, Constant):
        return 'Constant'
    if isinstance(modality, Nonmodal):
        return 'Without extrema'
    if isinstance(modality, Multimodal):
        return 'Multiple extrema'
    raise ValueError(f"{modality!r} is not a modality")


def summary(polys: Iterable[Polynomial], a: float = 0.0, b: float = 1.0, **kwargs) -> pd.DataFrame:
    """
    Classify each polynomial over [a, b], returning one row per polynomial in input order. The mode column is NaN
    except for unimodal rows. Extra keyword arguments are passed on to find_modality.
    """
    rows = []
    for poly in polys:
        modality = find_modality(poly, a, b, **kwargs)
        rows += [(
            str(poly),
            poly.deg(),
            four_letter_code(modality),
            modality.mode if isinstance(modality, Unimodal) else np.nan,
        )]

    return pd.DataFrame(columns=['poly', 'deg', 'code', 'mode'], data=rows)
