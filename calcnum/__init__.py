"""Classic numerical methods in plain Python: linear systems, least squares, interpolation, quadrature, ODEs, roots and minimisation."""

__version__ = "0.1.0"