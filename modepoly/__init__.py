from .modality import (Constant, Modality, Multimodal, Nonmodal, Unimodal, Zero, find_modality,
                       find_prob_unimode)
from .poly import Polynomial
from .show import describe, four_letter_code, summary

__all__ = [
    "Constant",
    "Modality",
    "Multimodal",
    "Nonmodal",
    "Polynomial",
    "Unimodal",
    "Zero",
    "describe",
    "find_modality",
    "find_prob_unimode",
    "four_letter_code",
    "summary",
]
