# chartkit

Numeric building blocks for charting. The package has a small dense matrix
type, least-squares polynomial regression, value sequences with summary
statistics, and derived series (simple moving average, minimum and maximum
lines, linear and polynomial fits, percent change) that are computed over any
source of `(x, y)` values. It needs nothing outside the standard library.

## Installation

```
pip install chartkit
```

To run the test suite:

```
pip install "chartkit[test]"
pytest
```

## Modules

### `chartkit.matrix`

`Matrix(rows, cols, *values)` is a row-major matrix of floats. Missing values
are filled with zeros. Its methods include `get`, `set`, `row`, `col`, `size`,
`is_square`, `is_symmetric`, `arrays`, `copy`, `transpose`, `augment`,
`sub_matrix`, `swap_rows`, `scale_row`, `diagonal`, `diagonal_vector`, `l`,
`u`, `each`, `round`, `with_epsilon`, `multiply`, `times`, `pivotize`, `lu`,
`qr` and `inverse`. Two matrices compare equal with `==` when their shape and
elements match, and `str(m)` prints one row per line.

The module also has the constructors `identity`, `zero`, `ones`, `eye` and
`from_arrays`, which returns `None` for an empty list. `dot_product(v1, v2)`
multiplies two vectors. `DimensionMismatchError` is raised when shapes do not
fit together, and `inverse` raises it for a matrix that is not symmetric.
`SingularValueError` is raised when a matrix cannot be inverted.

### `chartkit.regression`

`poly(xvalues, yvalues, degree)` fits a polynomial by QR decomposition and
returns the coefficients, lowest power first. It raises
`PolyRegressionLengthError` when the two inputs differ in length.

### `chartkit.mathutil`

- Aggregates: `min_max`, `min_int`, `max_int`, `sum_values`, `sum_int`, `mean`
  and `mean_int`.
- Scaling: `normalize` scales values to fractions of their total, rounded down
  to four places.
- Rounding: `round_up`, `round_down`, `round_places` and
  `get_round_to_for_delta`.
- Angles and points: `degrees_to_radians`, `radians_to_degrees`,
  `percent_to_radians`, `radian_add`, `degrees_add`, `degrees_to_compass`,
  `circle_point` and `rotate_coordinate`.
- Changes: `abs_int` and `percent_difference(v1, v2)`.

### `chartkit.stringutil`

`split_csv(text)` splits on commas and trims whitespace around words. Commas
inside quotes are kept. The recognised quotes are `"`, `'`, backtick and curly
double quotes.

### `chartkit.parse`

- `parse_floats(*values)` drops commas, skips blank entries and raises
  `ValueError` on anything else it cannot read.
- `parse_times(layout, *values)` reads times written in a reference-time
  layout such as `"2006-01-02 15:04:05"`. Times without a zone are returned in
  UTC.

### `chartkit.seq`

`Seq(provider)` wraps either a plain sequence of numbers or an object with
`__len__` and `get_value(index)`. It offers the following methods:

- `values`, `each`, `map`, `fold_left` and `fold_right`
- `min`, `max`, `min_max`, `sort`, `reverse` and `median`
- `sum`, `average`, `variance` (population) and `std_dev`
- `percentile(percent)`, which raises `ValueError` outside `[0, 1]`
- `normalize`, which maps the values onto `[0, 1]`

`value_sequence(*values)` builds a `Seq` from numbers.

### `chartkit.random_sequence`

`RandomSequence(rng=None)` produces uniform random values. You can set it up
with `with_len`, `with_min` and `with_max`, and pass a `random.Random` for
repeatable output. `random_values(count)` and
`random_values_with_max(count, maximum)` return lists.

### Derived series

Each series is a dataclass whose `inner_series` provides `__len__` and
`get_values(index) -> (x, y)`. Each one offers `get_values` and `validate()`;
`validate()` raises `ValueError` when the series cannot produce values.

- `chartkit.sma_series.SMASeries`: a moving average over `period` values. The
  period defaults to 16.
- `chartkit.min_max_series.MinSeries` and `MaxSeries`: a flat line at the
  smallest or largest y value.
- `chartkit.linear_series.LinearSeries`: evaluates `y = m*x + b` at
  `x_values`. The coefficients come from `inner_series.coefficients()`, which
  returns `(m, b, stdev, avg)`.
- `chartkit.polynomial_regression_series.PolynomialRegressionSeries`: fits a
  polynomial of `degree` over a window of the inner series, set by `offset` and
  `limit`.
- `chartkit.percent_change_series.PercentChangeSeries`: the change of each y
  relative to the first y. Its inner series must also provide
  `get_first_values`, `get_last_values` and `validate`.

### `chartkit.logger`

`StdoutLogger` writes lines that start with a UTC timestamp and a level tag:

- `info`, `debug` and `error` log their arguments.
- `infof`, `debugf` and `errorf` log a `%`-style formatted message.
- `err` logs an exception's message.
- `fatal_err` logs an exception's message and raises `SystemExit(1)`.
- `println` writes a line to `stdout`, and `errorln` writes a line to `stderr`.

The module-level `info`, `infof`, `debug` and `debugf` do nothing when given
`None` in place of a logger.

## Examples

Fit a parabola:

```python
from chartkit.regression import poly

xs = [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
ys = [1, 6, 17, 34, 57, 86, 121, 162, 209, 262, 321]
print(poly(xs, ys, 2))  # approximately [1.0, 2.0, 3.0]
```

Summary statistics over a sequence:

```python
from chartkit.seq import value_sequence

s = value_sequence(1, 2, 3, 4, 5)
print(s.average(), s.variance())  # 3.0 2.0
print(s.normalize().values())     # [0.0, 0.25, 0.5, 0.75, 1.0]
```

A moving average over your own data source:

```python
from chartkit.sma_series import SMASeries

class Points:
    def __init__(self, xs, ys):
        self.xs, self.ys = xs, ys
    def __len__(self):
        return len(self.xs)
    def get_values(self, index):
        return self.xs[index], self.ys[index]

sma = SMASeries(period=10, inner_series=Points([1, 2, 3], [10, 9, 8]))
print(sma.get_last_values())  # (3, 9.0)
```

Split a line of comma separated values:

```python
from chartkit.stringutil import split_csv

print(split_csv('foo,bar,"baz,buzz"'))  # ['foo', 'bar', 'baz,buzz']
```

## What it does not do

chartkit computes data; it does not draw. It has no renderer and no chart
types such as pie or bar charts, and it produces no PNG or SVG output. It has
no fonts, colours or axes either. The `style` and `y_axis` fields on the series
are stored as given and are not interpreted. There is no command-line tool.