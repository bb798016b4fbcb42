import pytest

from tinylinalg.matrix import Matrix
from tinylinalg.vector import Vector


def assert_matrix_close(actual, expected, tol=1e-9):
    assert (actual.num_rows, actual.num_cols) == (expected.num_rows, expected.num_cols)
    for got, want in zip(actual.rows(), expected.rows()):
        assert got == pytest.approx(want, abs=tol)


TRIDIAGONAL = [[2, -1, 0], [-1, 2, -1], [0, -1, 2]]
SPD = [[4, 1, 1], [1, 3, 0], [1, 0, 2]]


def test_new_matrix_is_zero():
    m = Matrix(2, 3)
    assert (m.num_rows, m.num_cols) == (2, 3)
    assert m.rows() == [[0.0] * 3, [0.0] * 3]


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Matrix(-1, 2)


def test_one_based_indexing():
    m = Matrix(3, 3)
    for i in range(1, 4):
        for j in range(1, 4):
            m[i, j] = i * j
    assert m == Matrix.from_rows([[1, 2, 3], [2, 4, 6], [3, 6, 9]])
    assert m[2, 3] == m[3, 2]


@pytest.mark.parametrize("key", [(0, 1), (1, 0), (3, 1), (1, 3)])
def test_index_out_of_range(key):
    m = Matrix.from_rows([[1, 2], [3, 4]])
    with pytest.raises(IndexError):
        m[key]
    with pytest.raises(IndexError):
        m[key] = 9.0
    assert m.rows() == [[1.0, 2.0], [3.0, 4.0]]


def test_index_must_be_pair():
    with pytest.raises(TypeError):
        Matrix(2, 2)[1]


def test_from_rows_rejects_ragged():
    with pytest.raises(ValueError):
        Matrix.from_rows([[1, 2], [3]])


def test_add_sub_round_trip():
    a = Matrix.from_rows(TRIDIAGONAL)
    b = Matrix.from_rows(SPD)
    assert (a + b) - b == a
    assert a + b == b + a


def test_add_shape_mismatch():
    with pytest.raises(ValueError):
        Matrix(2, 2) + Matrix(2, 3)
    with pytest.raises(ValueError):
        Matrix(2, 2) - Matrix(3, 2)


def test_identity_is_multiplicative_neutral():
    a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    assert Matrix.identity(2) * a == a
    assert a * Matrix.identity(3) == a


def test_matrix_product_shape_and_mismatch():
    a = Matrix(2, 3)
    b = Matrix(3, 4)
    product = a * b
    assert (product.num_rows, product.num_cols) == (2, 4)
    with pytest.raises(ValueError):
        b * a


def test_product_transpose_identity():
    a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    b = Matrix.from_rows([[1, 0], [2, 1], [-1, 3]])
    assert (a * b).transpose() == b.transpose() * a.transpose()


def test_scalar_multiplication():
    a = Matrix.from_rows(SPD)
    assert a * 2.0 == a + a
    assert 2.0 * a == a * 2.0


def test_matrix_vector_product_matches_columns():
    a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    e2 = Vector.from_values([0, 1, 0])
    result = a * e2
    assert result.tolist() == [a[1, 2], a[2, 2]]


def test_matrix_vector_size_mismatch():
    with pytest.raises(ValueError):
        Matrix(2, 3) * Vector(2)


def test_transpose_round_trip():
    a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    t = a.transpose()
    assert (t.num_rows, t.num_cols) == (3, 2)
    assert t[3, 1] == a[1, 3]
    assert t.transpose() == a


def test_determinant_multiplicative():
    a = Matrix.from_rows(TRIDIAGONAL)
    b = Matrix.from_rows(SPD)
    assert (a * b).determinant() == pytest.approx(a.determinant() * b.determinant())


def test_determinant_row_swap_changes_sign():
    swapped = Matrix.from_rows([[0, 2], [3, 1]])
    ordered = Matrix.from_rows([[3, 1], [0, 2]])
    assert swapped.determinant() == pytest.approx(-ordered.determinant())


def test_determinant_singular_is_zero():
    assert Matrix.from_rows([[0, 1], [0, 2]]).determinant() == 0.0


def test_determinant_requires_square():
    with pytest.raises(ValueError):
        Matrix(2, 3).determinant()


def test_determinant_of_scaled_matrix():
    a = Matrix.from_rows(SPD)
    assert (a * 2.0).determinant() == pytest.approx(a.determinant() * 2.0 ** 3)


@pytest.mark.parametrize("rows", [TRIDIAGONAL, SPD])
def test_inverse_gives_identity(rows):
    a = Matrix.from_rows(rows)
    inv = a.inverse()
    assert_matrix_close(a * inv, Matrix.identity(3))
    assert_matrix_close(inv * a, Matrix.identity(3))


def test_inverse_determinant_is_reciprocal():
    a = Matrix.from_rows(SPD)
    assert a.inverse().determinant() * a.determinant() == pytest.approx(1.0)


def test_inverse_singular_raises():
    with pytest.raises(ValueError):
        Matrix.from_rows([[1, 2], [2, 4]]).inverse()


def test_inverse_requires_square():
    with pytest.raises(ValueError):
        Matrix(3, 2).inverse()


def test_pseudo_inverse_is_left_inverse():
    a = Matrix.from_rows([[1, 0], [0, 1], [1, 1]])
    pinv = a.pseudo_inverse()
    assert (pinv.num_rows, pinv.num_cols) == (2, 3)
    assert_matrix_close(pinv * a, Matrix.identity(2))


def test_pseudo_inverse_of_square_matches_inverse():
    a = Matrix.from_rows(SPD)
    assert_matrix_close(a.pseudo_inverse(), a.inverse())


def test_copy_and_rows_are_independent():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    c = a.copy()
    c[1, 1] = 10.0
    rows = a.rows()
    rows[0][0] = 20.0
    assert a[1, 1] == 1.0
    assert c[1, 1] == 10.0


def test_repr_round_trip():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    assert repr(a) == "Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])"


def test_str_format():
    assert str(Matrix.from_rows([[1, 2.5], [3, 4]])) == "1 2.5\n3 4"