"""pybarycentric: Pole-free barycentric rational interpolation.

Provides the :class:`BarycentricRational` class, which interpolates samples
on strictly increasing, unevenly spaced abscissas with the Floater-Hormann
family of barycentric rational interpolants, and the underlying array
functions :func:`floater_hormann_weights` and
:func:`barycentric_rational_interpolate`.

Example
-------
>>> from pybarycentric import BarycentricRational
>>> interp = BarycentricRational([0.0, 1.0, 2.5, 3.0], [1.0, 2.0, 0.5, 4.0])
>>> float(interp(2.5))
0.5
"""

from pybarycentric._version import __version__
from pybarycentric.barycentric import (
    DEFAULT_ORDER,
    BarycentricRational,
    barycentric_rational_interpolate,
    floater_hormann_weights,
)

__all__ = [
    "BarycentricRational",
    "DEFAULT_ORDER",
    "barycentric_rational_interpolate",
    "floater_hormann_weights",
    "__version__",
]
