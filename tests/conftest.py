import pytest

from imresample import Image


@pytest.fixture
def image_3x2():
    # image(x, y), row-major
    return Image([1., 2., 3.,
                  4., 5., 6.], 3, 2)
