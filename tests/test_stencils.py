# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
import pytest
from compactfd.stencils import (
    SCHEMES, BandedOperator, build_stencils, get_scheme, mirror_row,
)


def test_diag_is_all_ones():
    for order in (4, 6):
        _, diag, _, _ = build_stencils(12, order)
        assert np.array_equal(diag, np.ones(12))


def test_unused_corners_are_zero():
    for order in (4, 6):
        lower, _, upper, _ = build_stencils(12, order)
        assert lower[0] == 0.0
        assert upper[-1] == 0.0


def test_order4_M():
    N = 10
    lower, _, upper, _ = build_stencils(N, 4)
    assert upper[0] == 3.0
    assert np.all(upper[1:N - 1] == 0.25)
    assert np.all(lower[1:N - 1] == 0.25)
    assert lower[N - 1] == 3.0


def test_order4_Q_rows():
    N = 10
    _, _, _, Q = build_stencils(N, 4)
    A = Q.to_dense()
    assert np.allclose(A[0, :4], [-17 / 6, 3 / 2, 3 / 2, -1 / 6], rtol=0, atol=1e-15)
    assert np.all(A[0, 4:] == 0.0)
    for i in range(1, N - 1):
        row = A[i].copy()
        assert row[i - 1] == -0.75
        assert row[i + 1] == 0.75
        row[[i - 1, i + 1]] = 0.0
        assert np.all(row == 0.0), f"row {i} has extra nonzeros"
    assert np.allclose(A[-1, -4:], [1 / 6, -3 / 2, -3 / 2, 17 / 6], rtol=0, atol=1e-15)


def test_order6_M():
    N = 12
    lower, _, upper, _ = build_stencils(N, 6)
    assert upper[0] == 5.0
    assert upper[1] == 0.75
    assert np.allclose(upper[2:N - 2], 1 / 3)
    assert upper[N - 2] == 0.125
    # lower is upper mirrored
    assert np.array_equal(lower[1:], upper[:-1][::-1])


def test_order6_Q_rows():
    N = 12
    _, _, _, Q = build_stencils(N, 6)
    A = Q.to_dense()
    assert np.allclose(
        A[0, :6], [-197 / 60, -5 / 12, 5, -5 / 3, 5 / 12, -1 / 20], rtol=0, atol=1e-15
    )
    assert np.allclose(
        A[1, :5], [-43 / 96, -5 / 6, 9 / 8, 1 / 6, -1 / 96], rtol=0, atol=1e-15
    )
    for i in range(2, N - 2):
        assert np.allclose(
            A[i, i - 2:i + 3], [-1 / 36, -7 / 9, 0.0, 7 / 9, 1 / 36], rtol=0, atol=1e-15
        )
        assert np.count_nonzero(A[i]) == 4


def test_Q_interior_antisymmetric():
    for order, N in ((4, 10), (6, 14)):
        A = build_stencils(N, order)[3].to_dense()
        nb = len(get_scheme(order).left)
        for i in range(nb, N - nb):
            assert A[i, i - 1] == -A[i, i + 1]
            if order == 6:
                assert A[i, i - 2] == -A[i, i + 2]


def test_boundary_rows_mirror():
    """Right boundary rows are the left ones reversed with flipped sign."""
    for order, N in ((4, 10), (6, 14)):
        lower, _, upper, Q = build_stencils(N, order)
        A = Q.to_dense()
        for r in range(len(get_scheme(order).left)):
            assert np.array_equal(A[N - 1 - r], -A[r][::-1])
            assert lower[N - 1 - r] == upper[r]


def test_Q_rows_sum_to_zero():
    """Q annihilates constants."""
    for order in (4, 6):
        A = build_stencils(16, order)[3].to_dense()
        assert np.allclose(A.sum(axis=1), 0.0, atol=1e-14)


def test_mirror_row_involution():
    for scheme in SCHEMES.values():
        for row in scheme.left:
            assert mirror_row(mirror_row(row)) == row


def test_band_width():
    assert get_scheme(4).width == 3
    assert get_scheme(6).width == 5
    _, _, _, Q = build_stencils(9, 6)
    assert Q.bands.shape == (9, 11)


@pytest.mark.parametrize("order", [0, 2, 5, 8, "4", None])
def test_unsupported_order(order):
    with pytest.raises(ValueError):
        get_scheme(order)
    with pytest.raises(ValueError):
        build_stencils(12, order)


@pytest.mark.parametrize("order,N", [(4, 5), (6, 8), (6, 3)])
def test_too_few_nodes(order, N):
    with pytest.raises(ValueError):
        build_stencils(N, order)


def test_banded_operator_rejects_bad_shape():
    with pytest.raises(ValueError):
        BandedOperator(np.zeros((5, 4)), width=2)


def test_banded_matvec_matches_dense():
    rng = np.random.default_rng(7)
    for order in (4, 6):
        _, _, _, Q = build_stencils(20, order)
        f = rng.standard_normal(20)
        assert np.allclose(Q.matvec(f), Q.to_dense() @ f, rtol=1e-14, atol=1e-14)


def test_matvec_rejects_wrong_length():
    _, _, _, Q = build_stencils(12, 4)
    with pytest.raises(ValueError):
        Q.matvec(np.ones(11))
