# numlab

A compact collection of numerical methods in plain Python. It has no
third-party runtime dependencies.

## Modules

- `numlab.linalg`: `Vector`, a list of floats with `+`, `-`, scalar `*` and `/`, `norm`, `dot`, `map` and `format`. `Matrix` stores its data as columns and supports `m[i, j]` indexing, `from_columns`, `set_identity`, `transpose`, `copy`, `format`, and `@` with a vector or a matrix. Two helpers complete the module: `approx(x, y, acc, eps)` for numbers or vectors, and `linspace(start, stop, num)`.
- `numlab.qr`: `decomp(a)` computes a Gram–Schmidt QR factorisation. The module also has `back_substitution(r, y)`, `solve(q, r, b)`, `det(r)` for upper triangular `r`, and `inverse(q, r)`.
- `numlab.ode`:
  - `rkstep12(f, x, y, h)` takes one midpoint step and returns an Euler-embedded error estimate with it.
  - `driver(f, interval, yinit, h=0.125, acc=0.01, eps=0.01)` is an adaptive integrator that returns the lists of `x` and `y` values.
  - Example right-hand sides: `pendulum` and `orbit_equation(eps)`.
- `numlab.optimize`: `gradient(f, x)` and `hessian(f, x)` work by forward differences. `newton(f, x, acc=1e-3, maxiter=1000)` minimises with Newton steps and a backtracking line search.
- `numlab.roots`:
  - `jacobian(f, x, fx=None, dx=None)` is a forward-difference Jacobian.
  - `newton(f, start, acc=1e-2, dx=None, lambmin=0.01)` finds a root with a halving line search. `newton_interp(...)` does the same with a quadratic-interpolation line search.
  - `rosenbrock_gradient` and `himmelblau_gradient` are test systems.
  - `hydrogen_shooting(energy, rmin=0.01, rmax=8.0)` returns the radial wave function at `rmax` for the hydrogen s-wave.
- `numlab.spline`: `binsearch(x, z)` finds the interval holding `z`. `LinearSpline` offers `evaluate` and `integrate`. `QuadraticSpline` and `CubicSpline` offer `evaluate`, `derivative` and `integrate`. Integrals run from `x[0]`. A point outside the table raises `ValueError`.
- `numlab.specfuncs`:
  - `erf` is the Abramowitz–Stegun approximation.
  - `sgamma` is Stirling's series with recurrence and reflection.
  - `lngamma` returns NaN for `x <= 0`.
  - `write_tables(...)` writes `erf.dat`, `gamma.dat` and `lngamma.dat`.
  - `math_report()` returns a text comparison with known values.
- `numlab.ann`: `Network(n)` is a network of `n` hidden neurons `weight * f((x - center) / width)` with `f(z) = z exp(-z²)`. It has `forward`, `derivative`, `second_derivative` and `antiderivative(x, x0=0.0)`. It trains with `train` (gradient descent) or `train_numerical` (Newton minimisation).
- `numlab.epsilon`: `float_epsilon()` and `double_epsilon()` find machine epsilon by halving. The module also has `approx(a, b, acc=1e-9, eps=1e-9)` and a text `report()`.
- `numlab.vec3`: `Vec3`, a frozen three-component vector over float, int or complex scalars. It has `+`, `-`, scalar `*` and `/`, `norm`, `dot`, `cross`, `approx` and `format`. `demo(label, kind)` returns a text demonstration.
- `numlab.harmonic`: `harmonic_sum(start, end)` adds up `1/i` for `start <= i < end`. `parallel_harmonic_sum(nterms, nworkers)` splits the sum over worker processes. Terms left over by the integer division are not summed.
- `numlab.sincos_io`: `tabulate(values)` yields lines of the form `x sin(x) cos(x)`.

## Installation

```
pip install .
```

## Library use

```python
from numlab.linalg import Matrix, Vector
from numlab.qr import decomp, solve
from numlab.spline import CubicSpline

a = Matrix.from_columns([Vector([2.0, 1.0]), Vector([1.0, 3.0])])
q, r = decomp(a)
x = solve(q, r, Vector([3.0, 5.0]))
print(a @ x)

spline = CubicSpline([0, 1, 2, 3], [0.0, 1.0, 4.0, 9.0])
print(spline.evaluate(1.5), spline.integrate(3.0))
```

## Commands

```
numlab-ode          # pendulum and orbit solutions: ode_result.dat, orbits.dat
numlab-specfuncs    # lngamma report; erf.dat, gamma.dat, lngamma.dat
numlab-roots        # Newton root finding, hydrogen shooting; wave.dat
numlab-spline       # tabulated.dat, lspline.dat, qspline.dat, cspline.dat
numlab-ann          # trains a 10-neuron network; network.dat
numlab-epsilon      # machine epsilon and floating-point comparisons
numlab-vec3         # Vec3 arithmetic demonstration
numlab-harmonic -terms 1e7 -threads 4
numlab-sincos --input numbers.txt --output table.txt
```

These commands take `--directory DIR` to set where data files are written:
`numlab-ode`, `numlab-specfuncs`, `numlab-roots`, `numlab-spline` and `numlab-ann`.
The current directory is the default.

`numlab-specfuncs` also accepts `-xmin`, `-xmax`, `-dx` and `-dx2`. The defaults are 0, 10, 0.125 and 0.01.

For `numlab-harmonic`, `-threads` sets the number of worker processes.

If `numlab-sincos` cannot open either file, it exits with status 1.

## What it does not do

The commands write plain whitespace-separated `.dat` files only. They do not draw any plots. To see the curves, pass the files to a plotting tool of your choice.

## Tests

```
pip install .[test]
pytest
```