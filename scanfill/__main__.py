import argparse
import logging
import sys

from .canvas import Canvas
from .scene import SHAPES, draw_scene

logger = logging.getLogger('scanfill')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='scanfill',
                                     description='Fill and outline polygons into a PNG.')
    parser.add_argument('--width', type=int, default=800)
    parser.add_argument('--height', type=int, default=600)
    parser.add_argument('--shapes', nargs='*', choices=sorted(SHAPES),
                        default=['star', 'quad', 'triangle', 'island'],
                        help='shapes to draw, in draw order')
    parser.add_argument('--output', default='out.png')
    parser.add_argument('--show', action='store_true',
                        help='show the result in a window until Escape is pressed')
    parser.add_argument('--verbose', '-v', action='store_true')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    try:
        canvas = Canvas(args.height, args.width)
    except ValueError as e:
        logger.critical('%s', e)
        return 1
    draw_scene(canvas, args.shapes)

    if args.show:
        import cv2
        from .display import show_canvas
        try:
            show_canvas(canvas)
        except cv2.error as e:
            logger.critical('could not open window: %s', e)
            return 1

    filename, _, filetype = args.output.rpartition('.')
    if not filename:
        filename, filetype = args.output, 'png'
    try:
        path = canvas.save_canvas(filename, filetype)
    except (OSError, ValueError) as e:
        logger.critical('could not write %s: %s', args.output, e)
        return 1
    logger.info('saved %s', path)
    return 0


if __name__ == '__main__':
    sys.exit(main())
