"""Package dedicated to approximating one dimensional functions given by samples.

This file includes re-exports types and functions that are expected to be used
by users, either for directly creating them, or to just use them for type-hinting.
"""

import logging

# Algorithm capabilities
from approx1d.algorithm import DifferentiableAlgorithm as DifferentiableAlgorithm
from approx1d.algorithm import IntegrableAlgorithm as IntegrableAlgorithm
from approx1d.algorithm import InterpolationAlgorithm as InterpolationAlgorithm
from approx1d.algorithm import OrderLimitedAlgorithm as OrderLimitedAlgorithm

# Hermite splines
from approx1d.hermite import HermiteSpline as HermiteSpline

# Interpolation
from approx1d.interpolation import Interpolation1D as Interpolation1D
from approx1d.interpolation import InterpolationMode as InterpolationMode
from approx1d.interpolation import select_algorithm as select_algorithm

# Neville-type algorithms
from approx1d.polynomial import PolynomialInterpolation as PolynomialInterpolation
from approx1d.rational import RationalInterpolation as RationalInterpolation

# Samples
from approx1d.samples import SampleList as SampleList

# Splines
from approx1d.splines import BoundaryKind as BoundaryKind
from approx1d.splines import CubicSplineInterpolation as CubicSplineInterpolation
from approx1d.splines import SplineBC as SplineBC
from approx1d.splines import cubic_spline as cubic_spline

# Tridiagonal systems
from approx1d.tridiagonal import solve_tridiagonal as solve_tridiagonal

logging.getLogger(__name__).addHandler(logging.NullHandler())
