import itertools

import pytest

from ktx_py import KtxHeader, TextureKind, classify


def make_header(levels=1, array=0, faces=1, depth=0, height=0):
    return KtxHeader(
        pixel_width=16,
        pixel_height=height,
        pixel_depth=depth,
        array_element_count=array,
        face_count=faces,
        mipmap_level_count=levels,
    )


# ----------------------------------------------------------------------------
# Dimensionality x mipmaps
# ----------------------------------------------------------------------------
@pytest.mark.parametrize("levels, expected", [
    (0, TextureKind.ONE_D_NO_MIPMAPS),
    (1, TextureKind.ONE_D_NO_MIPMAPS),
    (5, TextureKind.ONE_D_WITH_MIPMAPS),
])
def test_one_d(levels, expected):
    assert classify(make_header(levels=levels)) == expected


@pytest.mark.parametrize("levels, expected", [
    (1, TextureKind.TWO_D_NO_MIPMAPS),
    (2, TextureKind.TWO_D_WITH_MIPMAPS),
])
def test_two_d(levels, expected):
    assert classify(make_header(levels=levels, height=16)) == expected


@pytest.mark.parametrize("levels, expected", [
    (1, TextureKind.THREE_D_NO_MIPMAPS),
    (3, TextureKind.THREE_D_WITH_MIPMAPS),
])
def test_three_d_wins_over_height(levels, expected):
    assert classify(make_header(levels=levels, height=16, depth=4)) == expected


def test_all_counts_at_one_is_1d():
    header = make_header(levels=1, array=1, faces=1, depth=1, height=1)
    assert classify(header) == TextureKind.ONE_D_NO_MIPMAPS


# ----------------------------------------------------------------------------
# Arrays and cube maps are leaf classifications
# ----------------------------------------------------------------------------
def test_array_takes_precedence():
    header = make_header(levels=4, array=3, faces=6, depth=8, height=8)
    assert classify(header) == TextureKind.TEXTURE_ARRAY


def test_cube_map():
    assert classify(make_header(faces=6, height=32)) == TextureKind.CUBE_MAP
    assert classify(make_header(levels=6, faces=6, height=32)) == TextureKind.CUBE_MAP


def test_classify_is_total():
    values = (0, 1, 2, 6)
    for levels, array, faces, depth, height in itertools.product(values, repeat=5):
        kind = classify(make_header(levels, array, faces, depth, height))
        assert isinstance(kind, TextureKind)
        assert kind != TextureKind.UNKNOWN
