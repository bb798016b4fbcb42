# tinylinalg

Small dense linear algebra in pure Python, with no dependencies outside the
standard library.

- `tinylinalg.vector.Vector` is a fixed-size vector of floats.
- `tinylinalg.matrix.Matrix` is a dense matrix of floats, indexed from 1.
- `tinylinalg.nonsquare.NonSquareSystem` solves over- and under-determined
  systems `A x = b` through the pseudo-inverse.
- `tinylinalg.dataloader` and `tinylinalg.evaluator` support a linear regression
  on comma-separated data.

## Installation

```
pip install .
```

To install with the test requirements (pytest):

```
pip install .[test]
```

## Vectors

```python
from tinylinalg.vector import Vector

v = Vector(3)                            # [0.0, 0.0, 0.0]
w = Vector(3, 2.5)                       # [2.5, 2.5, 2.5]
u = Vector.from_values([1.0, 2.0, 3.0])

u[0]        # 1.0, indexed from 0
u(1)        # 1.0, indexed from 1
u.set_at(3, 9.0)

print(u * 2.0)   # "2 4 18"
print(u + w)     # element-wise
print(-u)        # a new, negated vector
```

Vectors support the following operations:

- `+`, `-`, `*` and `/`, either element by element with another vector of the
  same size or with a scalar. Addition and multiplication also work with the
  scalar on the left.
- Unary minus.
- `len()`, iteration and `==`.
- `copy()` and `tolist()`.

`increment()` and `decrement()` add or subtract one from every element in place
and return the vector itself.

Errors are reported as exceptions:

- An index out of range raises `IndexError`.
- A non-integer index raises `TypeError`.
- Vectors of different sizes raise `ValueError`.
- A negative size raises `ValueError`.

## Matrices

```python
from tinylinalg.matrix import Matrix

m = Matrix.from_rows([[4, 1], [1, 3]])
m[1, 2]               # 1.0, indexed from 1
m.num_rows, m.num_cols

m.determinant()       # 11.0
m.inverse()
m.transpose()
Matrix.identity(3)
```

Matrices support the following operations:

- `+` and `-` with a matrix of the same shape.
- `*` with a matrix, which gives the matrix product.
- `*` with a `Vector`, which gives a `Vector`.
- `*` with a scalar, on either side.
- `==`, `copy()` and `rows()`, which returns the contents as new lists.

`str()` gives one line per row.

The linear algebra methods work as follows:

- `determinant()` uses Gaussian elimination. It swaps rows when a pivot is
  exactly zero, and returns `0.0` when no row can be swapped in.
- `inverse()` uses Gauss–Jordan elimination without row exchanges. It raises
  `ValueError` when a zero pivot appears, even if the matrix is in fact
  invertible after a row swap.
- `pseudo_inverse()` returns `(Aᵀ A)⁻¹ Aᵀ`.

Shape mismatches, and non-square matrices given to `determinant()` or
`inverse()`, raise `ValueError`. Bad indices raise `IndexError` or `TypeError`.

## Non-square systems

```python
from tinylinalg.matrix import Matrix
from tinylinalg.vector import Vector
from tinylinalg.nonsquare import NonSquareSystem

a = Matrix.from_rows([[1, 0], [0, 1], [1, 1]])
b = Vector.from_values([1, 2, 3])
x = NonSquareSystem(a, b).solve()
```

`solve()` depends on the shape of the matrix:

- With more rows than columns, it returns the least-squares solution
  `(Aᵀ A)⁻¹ Aᵀ b`.
- With fewer rows than columns, it returns the minimum-norm solution
  `Aᵀ (A Aᵀ)⁻¹ b`.

Some inputs raise `ValueError`:

- A square matrix, or a right-hand side whose size does not match the number of
  rows, when the system is constructed.
- A normal-equation matrix that cannot be inverted, when `solve()` is called.

## Regression on a data file

Each line of the data file holds at least nine comma-separated fields:

1. a vendor name;
2. a model name;
3. six numeric features;
4. the numeric target value.

The loader ignores further fields and blank lines. It raises `ValueError` for a
line with too few fields or a field that is not a number.

```python
import random

from tinylinalg.dataloader import load_data_from_file, parse_lines
from tinylinalg.evaluator import split_train_test, compute_rmse
from tinylinalg.nonsquare import NonSquareSystem

features, targets = load_data_from_file("machine.data")   # or parse_lines(lines)
train_a, train_b, test_a, test_b = split_train_test(
    features, targets, 0.8, random.Random(42)
)
coeff = NonSquareSystem(train_a, train_b).solve()
print(compute_rmse(test_a * coeff, test_b))
```

`split_train_test` shuffles the samples. It then puts
`int(len(targets) * train_ratio)` of them in the training set and the rest in
the test set. The train ratio defaults to 0.8. Pass a `random.Random` for a
repeatable split.

`compute_rmse` raises `ValueError` for vectors of different sizes. It returns
NaN when both vectors are empty.

## Command line

```
tinylinalg [DATA_FILE] [--seed N] [--train-ratio R]
```

The command runs a demonstration:

1. It prints a small vector and matrix.
2. It tries to solve an example overdetermined system through the
   pseudo-inverse. If that fails, it reports the failure on standard error.
3. It loads `DATA_FILE` (default `machine.data`) and splits it into training and
   test sets. `--seed` makes the split repeatable, and `--train-ratio` sets the
   training fraction (default 0.8).
4. It fits a linear model to the training set and prints the RMSE on the test
   set.

If the file cannot be read or the data cannot be fitted, the command prints a
message on standard error and exits with status 1.

## What it does not do

- There is no solver for square systems. `NonSquareSystem` rejects square
  matrices, and the package has no Gaussian-elimination or conjugate-gradient
  solver. For a square system, compute `m.inverse() * b` directly.
- Inversion does no pivoting, so it is not suited to badly conditioned or large
  problems.