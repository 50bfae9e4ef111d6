import numpy as np
import pytest

from shapealg import (
    ErrorCode,
    NamedShape,
    ShapeValidationError,
    binary_broadcast,
    broadcast_check,
    default_broadcast_axes,
)


@pytest.mark.parametrize(
    ("old_shape", "new_shape", "axes"),
    [
        ((), (4, 2, 1, 5), []),
        ((), (), []),
        ((1,), (2, 3, 4), [2]),
        ((4, 2, 3), (4, 3, 4, 2, 3), [2, 3, 4]),
        ((2,), (2, 3), [0]),
        ((1, 1), (5, 3), [0, 0]),
    ],
)
def test_broadcast_check_accepts_valid_mappings(
    old_shape: tuple[int, ...], new_shape: tuple[int, ...], axes: list[int]
) -> None:
    assert broadcast_check(old_shape, new_shape, axes) is None


def test_broadcast_check_agrees_with_numpy_for_default_axes() -> None:
    old_shape = (3, 1, 5)
    new_shape = (2, 3, 4, 5)

    broadcast_check(old_shape, new_shape, default_broadcast_axes(old_shape, new_shape))
    assert np.broadcast_to(np.zeros(old_shape), new_shape).shape == new_shape


def test_broadcast_check_rejects_rank_overflow() -> None:
    with pytest.raises(ShapeValidationError) as error:
        broadcast_check((4, 2, 2), (1, 1), [0, 1, 2])

    assert error.value.code == "broadcast_incompatible"
    assert error.value.message == (
        "cannot broadcast tensor of dimensions (4, 2, 2) to (1, 1) with axes [0, 1, 2]"
    )
    assert error.value.data == {
        "operation": "broadcast_check",
        "old_shape": (4, 2, 2),
        "new_shape": (1, 1),
        "axes": (0, 1, 2),
    }


def test_broadcast_check_rejects_incompatible_dimension() -> None:
    with pytest.raises(ShapeValidationError) as error:
        broadcast_check((3,), (2, 4), [1])

    assert error.value.kind is ErrorCode.BROADCAST_INCOMPATIBLE


def test_broadcast_check_rejects_unordered_axes() -> None:
    with pytest.raises(ShapeValidationError) as error:
        broadcast_check((2, 2), (2, 2, 2), [1, 0])

    assert error.value.code == "unordered_axes"
    assert error.value.message == "broadcast axes must be ordered, got 0 after 1"
    assert error.value.data["axis"] == 0
    assert error.value.data["previous_axis"] == 1


def test_broadcast_check_rejects_repeated_axis_for_non_unit_dims() -> None:
    with pytest.raises(ShapeValidationError) as error:
        broadcast_check((2, 2), (2, 2), [1, 1])

    assert error.value.kind is ErrorCode.BROADCAST_INCOMPATIBLE


def test_broadcast_check_reports_incompatibility_before_later_ordering() -> None:
    with pytest.raises(ShapeValidationError) as error:
        broadcast_check((3, 2), (2, 2, 2), [1, 0])

    assert error.value.kind is ErrorCode.BROADCAST_INCOMPATIBLE


def test_broadcast_check_rejects_axes_length_mismatch() -> None:
    with pytest.raises(ShapeValidationError) as error:
        broadcast_check((2, 2), (2, 2, 2), [1])

    assert error.value.kind is ErrorCode.RANK_MISMATCH
    assert error.value.message == (
        "expected length of axes (1) to match rank of shape (2)"
    )


def test_broadcast_check_rejects_axis_beyond_target_rank() -> None:
    with pytest.raises(ShapeValidationError) as error:
        broadcast_check((2,), (2, 2), [2])

    assert error.value.kind is ErrorCode.AXIS_OUT_OF_RANGE


def test_default_broadcast_axes_right_aligns() -> None:
    assert default_broadcast_axes((2, 2, 2), (2, 2, 2, 2)) == (1, 2, 3)
    assert default_broadcast_axes((2, 2, 2), (2, 2, 2, 2, 2)) == (2, 3, 4)
    assert default_broadcast_axes((), (3, 4)) == ()


def test_default_broadcast_axes_rejects_higher_rank() -> None:
    with pytest.raises(ShapeValidationError) as error:
        default_broadcast_axes((2, 2, 2), (2, 2))

    assert error.value.kind is ErrorCode.RANK_EXCEEDED
    assert error.value.message == (
        "cannot broadcast tensor of dimensions (2, 2, 2) to (2, 2)"
    )


def test_binary_broadcast_scalars() -> None:
    assert binary_broadcast((), (), (), ()) == ((), ())
    assert binary_broadcast((), (), (4, 2, 1, 5), ("batch", None, "data", None)) == (
        (4, 2, 1, 5),
        ("batch", None, "data", None),
    )


@pytest.mark.parametrize(
    ("lhs", "rhs", "expected"),
    [
        (
            ((8, 1, 6, 1), ("batch", None, "data", None)),
            ((7, 1, 5), ("time", "data", None)),
            ((8, 7, 6, 5), ("batch", "time", "data", None)),
        ),
        (
            ((7, 1, 5), ("time", "data", None)),
            ((8, 1, 6, 1), ("batch", None, "data", None)),
            ((8, 7, 6, 5), ("batch", "time", "data", None)),
        ),
        (
            ((5, 4), (None, None)),
            ((1,), ("data",)),
            ((5, 4), (None, "data")),
        ),
        (
            ((3, 1), ("x", "y")),
            ((15, 3, 5), ("batch", "x", None)),
            ((15, 3, 5), ("batch", "x", "y")),
        ),
    ],
)
def test_binary_broadcast_merges_shapes_and_names(
    lhs: tuple[tuple[int, ...], tuple[str | None, ...]],
    rhs: tuple[tuple[int, ...], tuple[str | None, ...]],
    expected: tuple[tuple[int, ...], tuple[str | None, ...]],
) -> None:
    result = binary_broadcast(lhs[0], lhs[1], rhs[0], rhs[1])

    assert result == expected
    assert isinstance(result, NamedShape)
    assert result.shape == np.broadcast_shapes(lhs[0], rhs[0])


def test_binary_broadcast_fast_path_returns_inputs() -> None:
    shape, names = binary_broadcast([2, 3], ["x", None], (2, 3), ("x", None))

    assert shape == (2, 3)
    assert names == ("x", None)


def test_binary_broadcast_rejects_incompatible_shapes_before_names() -> None:
    with pytest.raises(ShapeValidationError) as error:
        binary_broadcast((4, 2, 5), (None, None, None), (3, 2, 5), ("batch", "x", "y"))

    assert error.value.code == "broadcast_incompatible"
    assert error.value.message == (
        "cannot broadcast tensor of dimensions (4, 2, 5) to (3, 2, 5)"
    )
    assert error.value.data["lhs_shape"] == (4, 2, 5)
    assert error.value.data["rhs_shape"] == (3, 2, 5)


def test_binary_broadcast_shape_failure_wins_over_name_conflict() -> None:
    with pytest.raises(ShapeValidationError) as error:
        binary_broadcast((2, 4), ("a", "b"), (3, 4), ("c", "b"))

    assert error.value.kind is ErrorCode.BROADCAST_INCOMPATIBLE


def test_binary_broadcast_rejects_name_conflict() -> None:
    with pytest.raises(ShapeValidationError) as error:
        binary_broadcast((1, 2, 5), ("batch", "x", "y"), (3, 2, 5), ("time", "x", "y"))

    assert error.value.code == "name_conflict"
    assert error.value.message == "cannot merge names 'batch', 'time'"


def test_binary_broadcast_rejects_misaligned_names() -> None:
    with pytest.raises(ShapeValidationError) as error:
        binary_broadcast((2, 3), ("x",), (3,), (None,))

    assert error.value.kind is ErrorCode.RANK_MISMATCH


def test_binary_broadcast_reports_numpy_dims_as_typed_failure() -> None:
    with pytest.raises(ShapeValidationError) as error:
        binary_broadcast(tuple(np.array([4, 2, 5])), None, (3, 2, 5), None)

    assert error.value.kind is ErrorCode.BROADCAST_INCOMPATIBLE
    assert error.value.data["lhs_shape"] == (4, 2, 5)
