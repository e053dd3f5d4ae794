import argparse
import logging
import sys

import numpy
import astropy.io.fits as afits

from .image import Image, ImageError
from .interpolate import sample_nearest, resample_bilinear


DEMO_IMAGE = [
    1., 2., 3.,
    4., 5., 6.,
]

DEMO_QUERIES = [
    (1.5, 0.5),    # center of pixel (1, 0)
    (1.01, 0.01),  # near the corner of pixel (1, 0)
    (1., 1.),      # where four pixels meet
    (-0.1, 0.5),
    (3.1, 0.5),
    (0.5, -0.1),
    (0.5, 2.1),
    (2.6, 1.4),
    (1.3, 1.75),
    (0.25, 1.75),
]


def main(argv=None):
    parser = argparse.ArgumentParser(prog='imresample')
    parser.add_argument('--debug', '-D', action='store_true')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('nearest', help='sample an image at x y points')
    p.add_argument('image')
    p.add_argument('queries', help='text file with one "x y" pair per line')
    p.add_argument('--out', '-o')

    p = sub.add_parser('bilinear', help='blend the corners of an image')
    p.add_argument('image')
    p.add_argument('--out', '-o', required=True)
    p.add_argument('--procs', '-j', type=int, default=1,
                   help='worker processes, 0 for one per cpu')

    sub.add_parser('demo', help='sample the built-in 3x2 image')

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    try:
        if args.command == 'nearest':
            run_nearest(args.image, args.queries, args.out)
        elif args.command == 'bilinear':
            run_bilinear(args.image, args.out, args.procs or None)
        else:
            run_demo()
    except (ValueError, OSError) as e:
        parser.exit(2, '{}: error: {}\n'.format(parser.prog, e))


def run_nearest(image_file, query_file, out_file):
    image = load_image(image_file)
    queries = numpy.loadtxt(query_file, dtype=numpy.float32, ndmin=2)
    logging.info('sampling {} points from {}'.format(len(queries), image))
    values = sample_nearest(image, queries)
    if out_file is None:
        write_values(sys.stdout, values)
    else:
        with open(out_file, 'w') as f:
            write_values(f, values)
        logging.info('wrote {}'.format(out_file))


def run_bilinear(image_file, out_file, procs):
    image = load_image(image_file)
    logging.info('resampling {} with {} process(es)'.format(
        image, procs or 'all'))
    save_image(out_file, resample_bilinear(image, nprocs=procs))
    logging.info('wrote {}'.format(out_file))


def run_demo():
    image = Image(DEMO_IMAGE, 3, 2)
    values = sample_nearest(image, DEMO_QUERIES)
    for (x, y), v in zip(DEMO_QUERIES, values):
        print('({}, {}) -> {}'.format(x, y, v))


def write_values(f, values):
    for v in values:
        f.write('{!r}\n'.format(float(v)))


def load_image(fname):
    if fname.endswith('.npy'):
        return Image.from_array(numpy.load(fname))
    with afits.open(fname, memmap=False) as hdul:
        hdu = find_image_hdu(hdul)
        if hdu is None:
            raise ImageError('{}: no 2D image HDU'.format(fname))
        logging.debug('{}: using HDU {}'.format(fname, hdu.name))
        return Image.from_array(hdu.data)


def save_image(fname, image):
    if fname.endswith('.npy'):
        numpy.save(fname, image.array)
    else:
        afits.HDUList([afits.PrimaryHDU(numpy.array(image.array))]).writeto(
            fname, output_verify='fix', overwrite=True)


def find_image_hdu(hdul):
    for hdu in hdul:
        if hdu.data is not None and hdu.header['NAXIS'] == 2:
            return hdu


if __name__ == '__main__':
    main()
