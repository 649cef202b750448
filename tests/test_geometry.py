from __future__ import annotations

import pytest

from docview.geometry import (
    AffineTransform,
    Fine,
    FlipAxis,
    Rotation,
    Standard,
    TransformState,
    nearest_quarter_turn,
)
from docview.utils import normalize_degrees


def test_rotation_steps_wrap() -> None:
    assert Rotation.CW270.rotate_cw() is Rotation.NONE
    assert Rotation.NONE.rotate_ccw() is Rotation.CW270
    assert Rotation.CW90.swaps_dimensions
    assert not Rotation.CW180.swaps_dimensions


def test_rotation_from_degrees() -> None:
    assert Rotation.from_degrees(-90) is Rotation.CW270
    assert Rotation.from_degrees(450) is Rotation.CW90
    with pytest.raises(ValueError):
        Rotation.from_degrees(45)


@pytest.mark.parametrize(
    "degrees, expected",
    [
        (0, Rotation.NONE),
        (44.9, Rotation.NONE),
        (45, Rotation.CW90),
        (135, Rotation.CW180),
        (-30, Rotation.NONE),
        (260, Rotation.CW270),
        (350, Rotation.NONE),
    ],
)
def test_nearest_quarter_turn(degrees: float, expected: Rotation) -> None:
    assert nearest_quarter_turn(degrees) is expected


def test_normalize_degrees() -> None:
    assert normalize_degrees(-90) == 270
    assert normalize_degrees(720) == 0
    assert normalize_degrees(359.5) == 359.5


def test_standard_addition_stays_standard() -> None:
    assert Standard(Rotation.CW270) + Standard(Rotation.CW180) == Standard(Rotation.CW90)


def test_addition_with_fine_yields_fine() -> None:
    assert Standard(Rotation.CW90) + Fine(10.0) == Fine(100.0)
    assert Fine(350.0) + Standard(Rotation.CW90) == Fine(80.0)


def test_fine_tolerances() -> None:
    assert Fine(180.005).is_multiple_of_90()
    assert not Fine(30.0).is_multiple_of_90()
    assert Fine(359.995).is_none()
    assert Fine(100.0).nearest() is Rotation.CW90


def test_transform_state_toggles() -> None:
    state = TransformState()
    assert state.is_identity

    flipped = state.toggled(FlipAxis.HORIZONTAL)
    assert flipped.flip_horizontal and not flipped.flip_vertical
    assert flipped.mirrored
    assert not flipped.toggled(FlipAxis.VERTICAL).mirrored
    assert flipped.toggled(FlipAxis.HORIZONTAL) == state


def test_rotation_matrix_is_clockwise_in_screen_space() -> None:
    assert AffineTransform.rotation(90).apply(1, 0) == (0.0, 1.0)
    assert AffineTransform.rotation(180).apply(1, 2) == (-1.0, -2.0)


def test_composition_applies_right_operand_first() -> None:
    combined = AffineTransform.translation(10, 0) @ AffineTransform.scaling(2)
    assert combined.apply(1, 1) == (12.0, 2.0)
    assert AffineTransform.scaling(2).then(AffineTransform.translation(10, 0)) == combined


def test_inverse_round_trip() -> None:
    matrix = AffineTransform.translation(3, -4) @ AffineTransform.rotation(33) @ AffineTransform.scaling(2, 3)
    assert (matrix @ matrix.inverse()).is_close(AffineTransform.identity())


def test_singular_matrix_has_no_inverse() -> None:
    with pytest.raises(ValueError):
        AffineTransform.scaling(0).inverse()


def test_transform_rect_bounds_rotated_rectangle() -> None:
    assert AffineTransform.rotation(90).transform_rect(0, 0, 120, 80) == (-80.0, 0.0, 0.0, 120.0)


def test_svg_serialisation() -> None:
    assert AffineTransform.translation(5, -2).to_svg() == "matrix(1 0 0 1 5 -2)"
