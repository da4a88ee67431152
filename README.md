# calcnum

A small collection of classic numerical methods in plain Python, with no
dependencies beyond the standard library. Vectors are lists of floats,
matrices are lists of rows, and functions are ordinary callables.

## What is inside

| Module | Contents |
| --- | --- |
| `calcnum.matrix` | `dot`, `norm2`, `transpose`, `matvec`, `matmul`, `format_vector`, `format_matrix` |
| `calcnum.linear` | Gaussian elimination with partial pivoting (`eliminate`, `gauss`), `cholesky`, `substitutions` |
| `calcnum.iterative` | `jacobi`, `conjugate_gradient` |
| `calcnum.least_squares` | `least_squares` (normal equations), `fit_periodic`, `predict_periodic` |
| `calcnum.qr` | Gram–Schmidt `qr`, `qr_least_squares` |
| `calcnum.interpolation` | `chebyshev` nodes, `newton_coefficients`, `newton_evaluate` |
| `calcnum.differentiation` | central-difference `derivative`, `optimal_step`, `richardson` extrapolation |
| `calcnum.quadrature` | composite `simpson` and `midpoint`, `double_simpson`, `adaptive_simpson`, Gauss–Legendre `gauss2` and `gauss3` |
| `calcnum.ode` | fixed-step `midpoint` and step-controlled `adaptive_midpoint` for scalar ODEs |
| `calcnum.roots` | `secant`, `inverse_quadratic`, `ConvergenceError` |
| `calcnum.optimization` | `golden_section`, `parabolic` |
| `calcnum.pendulum` | `rk4_step`, `period`, `small_angle_period` |
| `calcnum.taylor` | `cos2`, `cos2_max_residual`, `sqrt_approx`, `sqrt_max_residual` |

Functions never modify their arguments; they return new lists.

A few return conventions worth knowing:

- `jacobi` and `conjugate_gradient` return `(solution, iterations)`.
  `conjugate_gradient` stops after at most as many iterations as the system
  has unknowns.
- `least_squares` and `fit_periodic` return `(solution, residual_2_norm)`.
  `fit_periodic` fits
  `v = c0 + c1 t + c2 sin 2πt + c3 cos 2πt + c4 cos 4πt`.
- `qr` returns `(Q, R)`; `cholesky` returns one matrix holding the lower
  factor below the diagonal and its transpose above it, ready for
  `substitutions`.
- `double_simpson` returns `(estimate, error_estimate)`.
- `secant`, `inverse_quadratic`, `golden_section` and `parabolic` return
  `(x, iterations)`. The root finders take a number of `digits` and stop
  once `|f(x)| < 0.5 * 10**-digits`; they raise `ConvergenceError` after
  50 iterations. `parabolic` raises `ConvergenceError` after 100 iterations
  or when its three points are collinear.
- `rk4_step(t, h, theta, w)` returns `(t + h, theta, w)` after one step.

Invalid input — mismatched sizes, non-square matrices, a non-positive-definite
matrix for `cholesky`, repeated interpolation nodes, non-positive steps —
raises `ValueError`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Solving a linear system:

```python
from calcnum.linear import gauss

x = gauss([[1, -1, 0], [-1, 2, 1], [0, 1, 2]], [0, 2, 3])
```

Integrating and differentiating:

```python
import math
from calcnum.quadrature import simpson, adaptive_simpson
from calcnum.differentiation import derivative

area = simpson(math.sin, 0.0, math.pi, 32)
area2 = adaptive_simpson(math.sin, 0.0, math.pi, 1e-8)
slope = derivative(math.cos, 2.7, 1e-5)
```

Finding a root:

```python
import math
from calcnum.roots import secant, ConvergenceError

try:
    root, iterations = secant(lambda x: math.cos(x) - x**3 + x, 0.0, -0.5, 8)
except ConvergenceError:
    ...
```

Interpolating on Chebyshev nodes:

```python
import math
from calcnum.interpolation import chebyshev, newton_coefficients, newton_evaluate

xs = chebyshev(6, 0.0, math.pi / 2)
coeffs = newton_coefficients(xs, math.sin)
value = newton_evaluate(xs, coeffs, math.pi / 6)
```

## Command line

The `calcnum` command runs worked demonstrations of the methods and prints
their results. With no argument it runs all of them; otherwise name one:
`integral`, `interpolation`, `iterative`, `least-squares`, `ode`,
`optimization`, `pendulum`, `qr`, `roots`, `quadrature`, `linear`, `taylor`.

```
calcnum --help
calcnum qr
```

## What it does not do

The command only runs the built-in demonstrations; it does not read
systems, data points or functions from files or from the command line.
Everything is dense, pure-Python arithmetic on lists, meant for small
problems rather than large or sparse ones.