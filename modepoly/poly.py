"""
Integer polynomials.

In this module, a polynomial over the integers is represented as a list of coefficients starting with the constant
term, for instance 1 - 2p + p^3 would be the list [1, -2, 0, 1]. Trailing zeros are never trimmed implicitly, so
[1, 0, 0] and [1] are different lists representing the same polynomial.
"""
from __future__ import annotations

import itertools
import math
from fractions import Fraction
from typing import Literal, Sequence

import numpy as np
import numpy.typing as npt


class Polynomial:
    """
    A polynomial over the integers, represented by a dense list of coefficients indexed by exponent. Thus
    Polynomial(1) is the integer 1, and Polynomial(0, 1) is the variable.

    >>> Polynomial(1, 0, 1)
    Polynomial('p^2 + 1')
    >>> Polynomial(1, 0, 1) == Polynomial(1, 0, 1, 0, 0)
    True
    """
    coeffs: list[int]
    var: str

    def __init__(self, *coeffs: int, var: str = 'p'):
        self.coeffs = list(coeffs)
        self.var = var

    @staticmethod
    def empty() -> Polynomial:
        return Polynomial()

    @staticmethod
    def from_coefficients(coeffs: Sequence[int], var: str = 'p') -> Polynomial:
        """Copy a coefficient sequence verbatim, constant term first."""
        return Polynomial(*coeffs, var=var)

    @staticmethod
    def monomial(coef: int, power: int) -> Polynomial:
        """
        The polynomial coef * p^power.

        >>> Polynomial.monomial(3, 2).coeffs
        [0, 0, 3]
        """
        if power < 0:
            raise ValueError(f"A monomial must have a non-negative power, was given {power}.")
        return Polynomial(*([0] * power), coef)

    def copy(self) -> Polynomial:
        return Polynomial(*self.coeffs, var=self.var)

    def with_variable_name(self, var: str) -> Polynomial:
        return Polynomial(*self.coeffs, var=var)

    def deg(self) -> int:
        """The degree of a polynomial is the degree of its leading nonzero term. The zero polynomial has degree -1."""
        for i in range(len(self.coeffs) - 1, -1, -1):
            if self.coeffs[i] != 0:
                return i
        return -1

    def trim(self) -> Polynomial:
        """A copy with the trailing zero coefficients removed."""
        return Polynomial(*self.coeffs[:self.deg() + 1], var=self.var)

    def is_zero(self) -> bool:
        return all(c == 0 for c in self.coeffs)

    def exact_value(self, x: float | Fraction) -> Fraction:
        """
        Evaluate exactly at a rational point. Every finite float is a dyadic rational, so at a float x this is the true
        value of the polynomial there, free of rounding.

        >>> Polynomial(1, -3).exact_value(1/3)
        Fraction(1, 18014398509481984)
        """
        num, den = Fraction(x).as_integer_ratio()

        # Horner's rule on den^n p(num/den), which stays in the integers.
        acc, den_power = 0, 1
        for c in reversed(self.coeffs):
            acc = acc * num + c * den_power
            den_power *= den

        return Fraction(acc, den_power // den) if self.coeffs else Fraction(0)

    def sign_at(self, x: float | Fraction) -> int:
        """The sign (-1, 0 or 1) of the exact value of the polynomial at x."""
        value = self.exact_value(x)
        return (value > 0) - (value < 0)

    def evaluate(self, x: float | npt.ArrayLike):
        """
        Evaluate the polynomial at a finite point, or elementwise over an array of points. The value is computed exactly
        and rounded once to a floating point number, so huge coefficients are fine as long as the value itself fits in
        a float. Values too large for a float come out as an infinity.

        >>> Polynomial(1, 1, 1).evaluate(2)
        7.0
        >>> Polynomial(0, 1, -1).evaluate([0, 0.5, 1]).tolist()
        [0.0, 0.25, 0.0]
        """
        xs = np.asarray(x, dtype=float)
        if xs.ndim == 0:
            return self._evaluate_float(float(xs))
        return np.vectorize(self._evaluate_float, otypes=[float])(xs)

    def _evaluate_float(self, x: float) -> float:
        value = self.exact_value(x)
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf

    def differentiate(self) -> Polynomial:
        """
        The formal derivative. The constant term is dropped, so the coefficient list gets shorter by one.

        >>> Polynomial(5, 3, 0, 2).differentiate()
        Polynomial('6p^2 + 3')
        >>> Polynomial(5).differentiate().coeffs
        []
        """
        return Polynomial(*(i * c for i, c in enumerate(self.coeffs) if i > 0), var=self.var)

    def find_prob_unimode(self):
        """Classify the modality of this polynomial over the unit interval [0, 1]."""
        from .modality import find_prob_unimode
        return find_prob_unimode(self)

    def __repr__(self):
        """
        >>> Polynomial()
        Polynomial('0')
        >>> Polynomial(0)
        Polynomial('0')
        >>> Polynomial(-1)
        Polynomial('-1')
        >>> Polynomial(0, 1)
        Polynomial('p')
        >>> Polynomial(0, 0, 2, var='x')
        Polynomial('2x^2')
        >>> Polynomial(-1, 0, 2)
        Polynomial('2p^2 - 1')
        """
        return f"Polynomial('{self.fmt()}')"

    def __str__(self):
        return self.fmt()

    def fmt(self, mode: Literal[None, 'latex'] = None):
        if self.is_zero():
            return '0'

        power_fmt = '{}^{}' if mode is None else '{}^{{{}}}'

        parts: list[str] = []
        for i, c in reversed(list(enumerate(self.coeffs))):
            if c == 0:
                continue

            sign = ' + ' if (c > 0 and parts) else ' - ' if (c < 0 and parts) else '' if c > 0 else '-'
            term = '' if i == 0 else self.var if i == 1 else power_fmt.format(self.var, i)
            coeff = f'{abs(c)}' if term == '' else '' if abs(c) == 1 else f'{abs(c)}'
            parts += [sign + coeff + term]

        return ''.join(parts)

    def _repr_latex_(self):
        return f'${self.fmt(mode="latex")}$'

    def __eq__(self, other):
        if isinstance(other, int):
            other = Polynomial(other)
        if not isinstance(other, Polynomial):
            return NotImplemented
        return all(c == d for c, d in itertools.zip_longest(self.coeffs, other.coeffs, fillvalue=0))

    # Polynomials can be mutated in place.
    __hash__ = None

    def add_inplace(self, other: int | Polynomial) -> None:
        for i, d in enumerate(Polynomial.coerce(other).coeffs):
            if i >= len(self.coeffs):
                self.coeffs.append(d)
            else:
                self.coeffs[i] += d

    def subtract_inplace(self, other: int | Polynomial) -> None:
        for i, d in enumerate(Polynomial.coerce(other).coeffs):
            if i >= len(self.coeffs):
                self.coeffs.append(-d)
            else:
                self.coeffs[i] -= d

    def add(self, other: int | Polynomial) -> Polynomial:
        result = self.copy()
        result.add_inplace(other)
        return result

    def subtract(self, other: int | Polynomial) -> Polynomial:
        result = self.copy()
        result.subtract_inplace(other)
        return result

    def multiply(self, other: int | Polynomial) -> Polynomial:
        """
        The product of two polynomials, by discrete convolution of the coefficient lists.

        >>> Polynomial(1, 1).multiply(Polynomial(-1, 1))
        Polynomial('p^2 - 1')
        """
        if isinstance(other, int):
            return Polynomial(*(c * other for c in self.coeffs), var=self.var)

        if not self.coeffs or not other.coeffs:
            return Polynomial(var=self.var)

        result = [0] * (len(self.coeffs) + len(other.coeffs) - 1)
        for (i, c), (j, d) in itertools.product(enumerate(self.coeffs), enumerate(other.coeffs)):
            result[i+j] += c*d
        return Polynomial(*result, var=self.var)

    def power(self, n: int) -> Polynomial:
        """
        Raise to a non-negative integer power, by repeated squaring.

        >>> Polynomial(1, 1).power(3)
        Polynomial('p^3 + 3p^2 + 3p + 1')
        """
        if n < 0:
            raise ValueError("Cannot invert a polynomial.")
        if n == 0:
            return Polynomial(1, var=self.var)
        if n == 1:
            return self.copy()

        result, square = None, self
        while n > 0:
            if n % 2 == 1:
                result = square if result is None else result.multiply(square)
            n //= 2
            if n > 0:
                square = square.multiply(square)

        return result

    def apply(self, g: Polynomial) -> Polynomial:
        """
        Substitute g for the variable, giving the composition self(g). This accumulates coef_i * g^i term by term,
        which is slow but straightforward.

        >>> Polynomial(0, 0, 1).apply(Polynomial(1, 1))
        Polynomial('p^2 + 2p + 1')
        """
        out = Polynomial(var=g.var)
        g_power = Polynomial(1, var=g.var)
        for i, c in enumerate(self.coeffs):
            if i > 0:
                g_power = g_power.multiply(g)
            if c != 0:
                out.add_inplace(g_power.multiply(c))
        return out

    def __add__(self, other: int | Polynomial) -> Polynomial:
        if not isinstance(other, (int, Polynomial)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: int | Polynomial) -> Polynomial:
        if not isinstance(other, (int, Polynomial)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: int | Polynomial):
        return (-self) + other

    def __iadd__(self, other: int | Polynomial) -> Polynomial:
        if not isinstance(other, (int, Polynomial)):
            return NotImplemented
        self.add_inplace(other)
        return self

    def __isub__(self, other: int | Polynomial) -> Polynomial:
        if not isinstance(other, (int, Polynomial)):
            return NotImplemented
        self.subtract_inplace(other)
        return self

    def __neg__(self) -> Polynomial:
        return Polynomial(*(-c for c in self.coeffs), var=self.var)

    def __mul__(self, other: int | Polynomial) -> Polynomial:
        if not isinstance(other, (int, Polynomial)):
            return NotImplemented
        return self.multiply(other)

    __radd__ = __add__
    __rmul__ = __mul__

    def __pow__(self, n: int) -> Polynomial:
        return self.power(n)

    def __call__(self, x):
        """Compose with a polynomial, or evaluate at a number."""
        if isinstance(x, Polynomial):
            return self.apply(x)
        return self.evaluate(x)

    @staticmethod
    def coerce(other: int | Polynomial) -> Polynomial:
        if isinstance(other, int):
            return Polynomial(other)
        if isinstance(other, Polynomial):
            return other
        raise ValueError(f"Cannot coerce {other} to a Polynomial")
