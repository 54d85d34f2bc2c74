"""
This script classifies the modality of integer polynomials over an interval, printing each polynomial with its
classification and then a summary table. Each polynomial is given as a comma separated list of coefficients, constant
term first, for example

    python classify.py 0,1,-1 0,63,-150,100 --lower 0 --upper 1
"""

import argparse
import logging

import modepoly
from modepoly.modality import DEFAULT_TOLERANCE


def coefficients(text: str) -> modepoly.Polynomial:
    try:
        return modepoly.Polynomial.from_coefficients([int(part) for part in text.split(',')])
    except ValueError:
        raise argparse.ArgumentTypeError(f"{text!r} is not a comma separated list of integers")


parser = argparse.ArgumentParser('Classify the modality of integer polynomials')
parser.add_argument('polys', type=coefficients, nargs='+', metavar='COEFFS', help='Coefficients, constant term first')
parser.add_argument('--lower', type=float, default=0.0, help='Left endpoint of the interval')
parser.add_argument('--upper', type=float, default=1.0, help='Right endpoint of the interval')
parser.add_argument('--tolerance', type=float, default=DEFAULT_TOLERANCE, help='Width at which bisection stops')
parser.add_argument('--var', type=str, default='p', help='Variable name used when printing polynomials')
parser.add_argument('--verbose', action='store_true', help='Log the working of the classifier')


def main(args: argparse.Namespace):
    polys = [poly.with_variable_name(args.var) for poly in args.polys]
    print(f"Classifying {len(polys)} polynomials over [{args.lower}, {args.upper}] with tolerance {args.tolerance}")

    for poly in polys:
        modality = modepoly.find_modality(poly, args.lower, args.upper, tol=args.tolerance)
        print(f"    {poly}: {modepoly.describe(modality)}")

    print()
    print(modepoly.summary(polys, args.lower, args.upper, tol=args.tolerance))


if __name__ == '__main__':
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )
    main(args)
