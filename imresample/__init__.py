from .image import Image, ImageError, DegenerateImageError
from .interpolate import sample_nearest, resample_bilinear

__all__ = ['Image', 'ImageError', 'DegenerateImageError',
           'sample_nearest', 'resample_bilinear']
