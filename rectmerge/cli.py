import argparse
import logging
import math
import sys
from .exceptions import RectMergeError, RectFormatError
from .io import read_rects, format_edges, format_polygons
from .merger import RectMerger
from .models import EPSILON

logger = logging.getLogger(__name__)


def positive_float(text):
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid number: {text!r}')
    if not math.isfinite(value) or value <= 0:
        raise argparse.ArgumentTypeError(f'must be a positive number, got {text!r}')
    return value


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='rectmerge',
        description='Merge axis-aligned rectangles into the outline of their union.')
    parser.add_argument('input', nargs='?', default='-',
                        help='File with one rectangle per line (min_x min_y max_x max_y). Defaults to stdin.')
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('--polygons', dest='mode', action='store_const', const='polygons',
                      help='Output closed boundary loops, one per line (default)')
    mode.add_argument('--edges', dest='mode', action='store_const', const='edges',
                      help='Output boundary edges, one per line')
    parser.add_argument('--epsilon', type=positive_float, default=EPSILON,
                        help=f'Coordinate tolerance (default: {EPSILON})')
    parser.add_argument('--plot', metavar='FILE', help='Save a plot of the rectangles and merged outline')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    parser.set_defaults(mode='polygons')
    return parser.parse_args(argv)


def error(msg):
    print('Error: ' + msg, file=sys.stderr)
    return 1


def main(argv=None, stdout=None):
    args = parse_args(argv)
    stdout = stdout or sys.stdout
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    try:
        rects = read_rects(sys.stdin if args.input == '-' else args.input)
        logger.info('Read %d rectangles from %s', len(rects), args.input)
        merger = RectMerger(args.epsilon)
        polygons = None
        if args.mode == 'edges':
            output = format_edges(merger.merge_edges(rects))
        else:
            polygons = merger.merge_polygons(rects)
            output = format_polygons(polygons)
        if args.plot and polygons is None:
            polygons = merger.merge_polygons(rects)
    except (RectMergeError, RectFormatError) as e:
        return error(str(e))
    except OSError as e:
        return error(f'cannot read {args.input}: {e.strerror}')
    if args.plot:
        # Imported lazily: plotting needs the optional diagram libraries.
        try:
            from .util.diagram import plot_merge
        except (ImportError, RuntimeError) as e:
            return error(f'--plot is unavailable: {e}')
    stdout.write(output)
    if args.plot:
        plot_merge(rects, polygons, filename=args.plot, show=False)
    return 0
