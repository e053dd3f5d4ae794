import numpy

from . import parallel
from .image import Image, DegenerateImageError


def sample_nearest(image, queries):
    Q = numpy.array(queries, dtype=numpy.float32)
    if Q.size == 0:
        Q = Q.reshape((0, 2))
    if Q.ndim != 2 or Q.shape[1] != 2:
        raise ValueError(
            'queries must be (x, y) pairs, got shape {}'.format(Q.shape))
    return nearest(image.array, Q[:, 0], Q[:, 1])


def nearest(array, X, Y):  # X: float32[], Y: float32[]
    '''
    Point-sample `array` at (X, Y). A point maps to the pixel at
    (floor(X), floor(Y)); points outside [0, w) x [0, h) (or NaN) give 0.
    '''
    h, w = array.shape
    inside = numpy.logical_and(
        numpy.logical_and(X >= 0, X < w),
        numpy.logical_and(Y >= 0, Y < h),
    )
    XI = floor_index(numpy.where(inside, X, 0))
    YI = floor_index(numpy.where(inside, Y, 0))
    return imageIndexMap(array, XI, YI, inside)


def imageIndexMap(array, X, Y, inside):  # X: int[], Y: int[]
    h, w = array.shape
    I = Y * w + X
    mapped = numpy.array(array.reshape(array.size)[I], numpy.float32)
    mapped[~inside] = 0.
    return mapped


def floor_index(x):
    return numpy.array(numpy.floor(x), dtype=int)


def resample_bilinear(image, nprocs=1):
    '''
    Blend the four corner pixels of `image` over its whole extent.

    Output pixel (x, y) weighs each corner by its distance from the
    opposite edges, so the result is a bilinear surface through the
    corners that ignores interior pixels.
    '''
    h, w = image.shape
    if w < 2 or h < 2:
        raise DegenerateImageError(
            'bilinear resampling needs at least 2x2 pixels, got {}x{}'.format(w, h))
    maxx, maxy = w - 1, h - 1
    corners = tuple(float(c) for c in image.corners())
    nprocs = nprocs or None
    if nprocs == 1:
        blended = corner_blend(corners, maxx, maxy, 0, h)
    else:
        nblocks = nprocs or parallel.cpu_count()
        jobs = [(corners, maxx, maxy, start, stop)
                for start, stop in parallel.row_blocks(h, nblocks)]
        blended = numpy.concatenate(parallel.map(_corner_blend, jobs, nprocs))
    # the formula reduces to the corner values there, float32 rounding aside
    blended[0, 0], blended[0, -1], blended[-1, 0], blended[-1, -1] = corners
    return Image.from_array(blended)


def corner_blend(corners, maxx, maxy, start, stop):
    '''
    Rows [start, stop) of the corner blend for a (maxx+1) x (maxy+1) image.
    All arithmetic is float32 and the division by maxx * maxy is done once
    after summing the four terms.
    '''
    tl, tr, bl, br = (numpy.float32(c) for c in corners)
    fx = numpy.float32(maxx)
    fy = numpy.float32(maxy)
    X = numpy.arange(maxx + 1, dtype=numpy.float32)[None, :]
    Y = numpy.arange(start, stop, dtype=numpy.float32)[:, None]
    return (
        bl * (fx - X) * Y +
        br * X * Y +
        tl * (fx - X) * (fy - Y) +
        tr * X * (fy - Y)
    ) / (fx * fy)


def _corner_blend(args):
    return corner_blend(*args)
