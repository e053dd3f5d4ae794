import numbers

import numpy


class ImageError(ValueError):
    pass


class DegenerateImageError(ImageError):
    pass


class Image(object):
    '''
    A width x height single channel float32 image.

    Pixels are kept row-major, so `array[y, x]` is the pixel at (x, y).
    The source buffer is copied and the copy is read-only.
    '''

    def __init__(self, data, width, height):
        width = _dimension('width', width)
        height = _dimension('height', height)
        data = numpy.array(data, dtype=numpy.float32)
        if data.ndim != 1:
            raise ImageError(
                'expected a flat buffer, got shape {}'.format(data.shape))
        if data.size != width * height:
            raise ImageError('buffer holds {} values, {}x{} needs {}'.format(
                data.size, width, height, width * height))
        self._array = data.reshape((height, width))
        self._array.setflags(write=False)

    @classmethod
    def from_array(cls, array):
        array = numpy.asarray(array)
        if array.ndim != 2:
            raise ImageError(
                'expected a 2D array, got shape {}'.format(array.shape))
        h, w = array.shape
        return cls(array.reshape(array.size), w, h)

    @property
    def width(self):
        return self._array.shape[1]

    @property
    def height(self):
        return self._array.shape[0]

    @property
    def shape(self):
        return self._array.shape

    @property
    def array(self):
        return self._array

    def get(self, x, y):
        for c in (x, y):
            if isinstance(c, bool) or not isinstance(c, numbers.Integral):
                raise IndexError(
                    'pixel coordinates must be integers, got {!r}'.format(c))
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError('({}, {}) is outside {}x{} image'.format(
                x, y, self.width, self.height))
        return self._array[y, x]

    def corners(self):
        # top-left, top-right, bottom-left, bottom-right
        a = self._array
        return a[0, 0], a[0, -1], a[-1, 0], a[-1, -1]

    def __eq__(self, other):
        if not isinstance(other, Image):
            return NotImplemented
        return numpy.array_equal(self._array, other._array)

    __hash__ = None

    def __repr__(self):
        return 'Image(width={}, height={})'.format(self.width, self.height)


def _dimension(name, n):
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise ImageError('{} must be an integer, got {!r}'.format(name, n))
    if n <= 0:
        raise ImageError('{} must be positive, got {}'.format(name, n))
    return int(n)
