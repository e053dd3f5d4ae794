import numpy
import pytest

from imresample import Image, ImageError


def test_dimensions(image_3x2):
    assert image_3x2.width == 3
    assert image_3x2.height == 2
    assert image_3x2.shape == (2, 3)
    assert image_3x2.array.dtype == numpy.float32


def test_get_addresses_x_then_y(image_3x2):
    assert image_3x2.get(0, 0) == 1.
    assert image_3x2.get(2, 0) == 3.
    assert image_3x2.get(0, 1) == 4.
    assert image_3x2.get(2, 1) == 6.


@pytest.mark.parametrize('x, y', [(-1, 0), (3, 0), (0, -1), (0, 2)])
def test_get_out_of_range(image_3x2, x, y):
    with pytest.raises(IndexError):
        image_3x2.get(x, y)


def test_corners(image_3x2):
    assert image_3x2.corners() == (1., 3., 4., 6.)


@pytest.mark.parametrize('data, width, height', [
    ([1., 2., 3.], 2, 2),
    ([1., 2., 3., 4., 5.], 2, 2),
    ([], 0, 1),
    ([1.], 1, 0),
    ([1., 2.], -1, -2),
    ([1., 2.], 2.0, 1),
    ([[1., 2.], [3., 4.]], 2, 2),
])
def test_construction_errors(data, width, height):
    with pytest.raises(ImageError):
        Image(data, width, height)


def test_construction_error_is_value_error():
    with pytest.raises(ValueError):
        Image([1.], 2, 1)


def test_source_buffer_is_copied():
    src = numpy.array([1., 2., 3., 4.], dtype=numpy.float32)
    image = Image(src, 2, 2)
    src[0] = 100.
    assert image.get(0, 0) == 1.


def test_read_only(image_3x2):
    with pytest.raises(ValueError):
        image_3x2.array[0, 0] = 10.


def test_from_array():
    image = Image.from_array(numpy.arange(6).reshape((2, 3)))
    assert image == Image([0, 1, 2, 3, 4, 5], 3, 2)
    assert image.get(1, 1) == 4.


def test_from_array_rejects_non_2d():
    with pytest.raises(ImageError):
        Image.from_array(numpy.zeros((2, 2, 3)))


@pytest.mark.parametrize('x, y', [(1.5, 0), (0, 1.0), (True, 0)])
def test_get_rejects_non_integers(image_3x2, x, y):
    with pytest.raises(IndexError, match='integers'):
        image_3x2.get(x, y)


def test_get_accepts_numpy_integers(image_3x2):
    assert image_3x2.get(numpy.int64(2), numpy.int32(1)) == 6.
