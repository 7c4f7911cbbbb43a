import pytest

from kbopt.keys import KeyInfo, LayoutType, key_info


def test_left_pinky():
    assert key_info(0, 0) == KeyInfo(hand="left", row=0, column=0, finger=0)


def test_right_index():
    info = key_info(1, 6)
    assert info.hand == "right"
    assert info.finger == 6


@pytest.mark.parametrize("row", [0, 1, 2])
def test_hands_split_at_column_six(row):
    assert [key_info(row, c).hand for c in range(12)] == ["left"] * 6 + ["right"] * 6


def test_thumbs():
    assert key_info(3, 2).hand == "left"
    assert key_info(3, 2).finger == 4
    assert key_info(3, 3).hand == "right"
    assert key_info(3, 3).finger == 5


def test_fingers_mirror():
    left = [key_info(0, c).finger for c in range(6)]
    right = [key_info(0, c).finger for c in range(6, 12)]
    assert left == [0, 0, 1, 2, 3, 3]
    assert right == [6, 6, 7, 8, 9, 9]


@pytest.mark.parametrize("row,col", [(4, 0), (0, 12), (-1, 0), (0, -1)])
def test_out_of_range(row, col):
    with pytest.raises(ValueError):
        key_info(row, col)


def test_layout_type_values():
    assert LayoutType("ortho") is LayoutType.ORTHO
    assert str(LayoutType.COLSTAG) == "colstag"
    with pytest.raises(ValueError):
        LayoutType("split")