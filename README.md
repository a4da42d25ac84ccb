# chartcore

Pure-Python numeric building blocks for charts. It has no third-party dependencies and needs Python 3.10 or later.

## Modules

### `chartcore.matrix`

`Matrix(rows, cols, values=None)` is a dense, row-major matrix of floats. It has these features:

- **Element access.** Use `m[row, col]`, `get`, `set`, `row`, `col`, `arrays`, `size` and `each()`. The `each()` method yields `(row, col, value)` tuples.
- **Shape tests.** `is_square` and `is_symmetric` check the shape. Equality with `==` compares shape and elements.
- **Derived matrices.** `copy`, `transpose`, `diagonal`, `diagonal_vector`, `lower`, `upper`, `sub_matrix` and `augment` build new matrices from an existing one.
- **Products.** `times` and `multiply` compute matrix products.
- **Decompositions.** `pivotize`, `lu()` and `qr()` are available. `lu()` returns `(l, u, p)` and `qr()` returns `(q, r)`.
- **Inverse.** `inverse()` accepts symmetric matrices only.
- **Constructors.** `identity`, `zero`, `ones`, `eye` and `from_arrays` create matrices. `dot_product(a, b)` works on plain sequences.

Errors are reported with exceptions:

- `DimensionMismatchError` is raised when shapes do not fit.
- `SingularValueError` is raised when a matrix cannot be inverted.

Both are subclasses of `ValueError`.

### `chartcore.regression`

`poly(xvalues, yvalues, degree)` returns the least-squares polynomial coefficients `c[0] … c[degree]`. It solves for them through QR. It raises `PolyLengthMismatchError` when the inputs differ in length.

### `chartcore.seq`

`Seq` wraps either a plain iterable of numbers or any object that has `__len__` and `get_value(index)`. It provides:

- `values`, `each`, `map`, `fold_left`, `fold_right`
- `min`, `max`, `min_max`, `sort`, `reverse`, `median`, `sum`
- `average`, `variance` and `std_dev`, all computed over the population
- `percentile(percent)`, which raises `ValueError` outside `[0, 1]`
- `normalize()`, which maps values onto `[0, 1]`. When every value is the same, each entry becomes NaN.

Empty sequences give `0` for the aggregates. `value_sequence(*values)` builds a `Seq` from its arguments.

### `chartcore.linear_sequence` and `chartcore.random_sequence`

- `LinearSeq(start, end, step)` counts from `start` toward `end`, upward or downward.
- `linear_range(start, end)` and `linear_range_with_step(start, end, step)` return lists that include both ends.
- `RandomSeq(length, minimum, maximum, rng)` yields random values. It is bounded by whichever limits are set.
- `random_values(count)` and `random_values_with_max(count, maximum)` return lists.

### `chartcore.mathutil`

This module contains:

- **Angles:** `degrees_to_radians`, `radians_to_degrees`, `percent_to_radians`, `radian_add`, `degrees_add`, `degrees_to_compass`.
- **Geometry:** `circle_point`, `rotate_coordinate`.
- **Rounding:** `round_up`, `round_down`, `round_places`, `get_round_to_for_delta`. `round_places` rounds half away from zero.
- **Statistics:** `min_max`, `normalize`, `mean`, `mean_int`.
- **Differences:** `percent_difference(v1, v2)`, which returns `(v2 - v1) / v1`, or `0` when `v1` is zero.

### `chartcore.logarithmic_range`

`LogarithmicRange(minimum, maximum, domain, descending)` maps values onto an integer pixel domain on a base-10 scale.

- `translate(value)` returns `0` for values below one. It raises `ValueError` when the range's `delta` is not above one.
- `get_ticks(formatter)` returns `(value, label)` pairs at each power of ten that spans the range.
- `Range` is the protocol such ranges follow.

### Derived series

Each of these classes is computed over an `inner_series` that offers `__len__` and `get_values(index) -> (x, y)`:

| Class | Module | What it computes |
|---|---|---|
| `LinearRegressionSeries` | `chartcore.linear_regression_series` | The least-squares line over a window set by `offset` and `limit`. A `limit` of 0 means the whole series. `coefficients()` returns `(m, b, stdev, avg)`. |
| `LinearSeries` | `chartcore.linear_series` | `y = m*x + b` over fixed `x_values`. The coefficients come from any object with `coefficients()`. |
| `PolynomialRegressionSeries` | `chartcore.polynomial_regression_series` | A polynomial fit of `degree` over a window. |
| `MinSeries`, `MaxSeries` | `chartcore.min_max_series` | A flat line at the smallest or largest y. |
| `SMASeries` | `chartcore.sma_series` | A simple moving average. The default `period` is 16. |
| `PercentChangeSeries` | `chartcore.percent_change_series` | Each y as a fractional change from the first y. `Series` is the protocol these series follow. |

For `LinearSeries`, use `LinearCoefficientSet`, `linear_coefficients(m, b)` or `normalized_linear_coefficients(m, b, stdev, avg)` from `chartcore.linear_coefficients` to supply the coefficients.

Every series has a `validate()` method, which raises `ValueError` when the series cannot be drawn. Most series also have `get_first_values()` and `get_last_values()`.

### Text and logging

- `chartcore.stringutil.split_csv(text)` splits text on commas and trims each field. Quoted sections keep their commas, and the quote characters are dropped.
- `chartcore.parse.parse_floats(*values)` drops commas and skips blank entries.
- `chartcore.parse.parse_times(layout, *values)` reads times written in a reference layout such as `"2006-01-02 15:04:05"`. Times without a zone are returned in UTC.
- `chartcore.logger.StdoutLogger` writes lines to its `stdout` stream, each starting with a UTC timestamp:
  - `info`/`infof`, `debug`/`debugf` and `error`/`errorf` write a line with the matching prefix.
  - `err` writes a line for an exception.
  - `fatal_err` also raises `SystemExit(1)`.
  - `errorln` writes to `stderr`.
  - `log_info`, `log_infof`, `log_debug` and `log_debugf` do nothing when the logger is `None`.

## Example

```python
from chartcore.linear_sequence import linear_range
from chartcore.regression import poly
from chartcore.seq import value_sequence

xs = linear_range(0, 10)
ys = [3 * x * x + 2 * x + 1 for x in xs]
print(poly(xs, ys, 2))                           # approximately [1.0, 2.0, 3.0]

print(value_sequence(1, 2, 3, 4, 5).variance())  # 2.0
```

## What it does not do

This package computes values only. It does not:

- draw anything or produce images
- provide chart types such as pie, bar or line charts
- draw legends, axes or styles
- include a command-line tool

The `style` and `y_axis` fields on the series classes are stored but not used.

## Running the tests

```
pip install -e ".[test]"
pytest
```