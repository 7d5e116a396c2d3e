import pytest

from tricircle.raster import GrayImage


def test_new_image_is_white():
    image = GrayImage(8, 6)
    assert set(image.pixels) == {255}
    assert len(image.pixels) == 48


def test_invalid_dimensions_rejected():
    with pytest.raises(ValueError):
        GrayImage(0, 10)


def test_fill_sets_every_pixel():
    image = GrayImage(5, 4)
    image.fill(0)
    assert all(image.pixel(x, y) == 0 for x in range(5) for y in range(4))


def test_contains():
    image = GrayImage(10, 5)
    assert image.contains(0, 0)
    assert image.contains(9, 4)
    assert not image.contains(10, 0)
    assert not image.contains(0, 5)
    assert not image.contains(-1, 2)


def test_pixel_out_of_range_raises():
    image = GrayImage(4, 4)
    with pytest.raises(IndexError):
        image.pixel(4, 0)


def test_draw_disc_paints_centre_only_within_radius():
    image = GrayImage(40, 40)
    image.draw_disc(20, 20, 5, 0)
    assert image.pixel(20, 20) == 0
    assert image.pixel(17, 20) == 0
    assert image.pixel(20, 26) == 255
    assert image.pixel(0, 0) == 255


def test_draw_disc_is_strictly_inside_radius():
    image = GrayImage(40, 40)
    image.draw_disc(20, 20, 5, 0)
    for x in range(40):
        for y in range(40):
            if image.pixel(x, y) == 0:
                assert (x - 20) ** 2 + (y - 20) ** 2 < 25


def test_draw_disc_near_edge_is_clipped():
    image = GrayImage(10, 10)
    image.draw_disc(0, 0, 4, 0)
    assert image.pixel(0, 0) == 0
    assert image.pixel(9, 9) == 255


def test_draw_disc_entirely_outside_changes_nothing():
    image = GrayImage(10, 10)
    image.draw_disc(-50, -50, 4, 0)
    assert set(image.pixels) == {255}


def test_to_pgm_layout():
    image = GrayImage(4, 3)
    image.draw_disc(1, 1, 1, 0)
    data = image.to_pgm()
    header = b"P5\n4 3\n255\n"
    assert data.startswith(header)
    assert data[len(header):] == bytes(image.pixels)