#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Cohen-Sutherland clipping viewer.

Without arguments opens the Tk window. With -i FILE clips the segments
from FILE ('-' for stdin) and prints a report; --plot saves a figure.
"""

import argparse
import logging
import sys

from clipping import clip
from scene import InputError, is_drawable, run_algorithm

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument('-i', '--input', help='input file, "-" for stdin; omit to open the GUI')
    parser.add_argument('--plot', help='save a matplotlib figure of the result to this path')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    return parser.parse_args(argv)


def format_segment(seg):
    return ' '.join(f'{v:g}' for v in seg)


def report(scene):
    """One line per input segment: original -> clipped or 'rejected'."""
    lines = []
    window = scene.window
    for seg in scene.segments:
        result = clip(seg, window)
        # NaN results are not drawn, so they read as rejected too
        tail = format_segment(result) if result is not None and is_drawable(result) else 'rejected'
        lines.append(f'{format_segment(seg)} -> {tail}')
    return lines


def read_input(path):
    if path == '-':
        return sys.stdin.read()
    with open(path, encoding='utf-8') as f:
        return f.read()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    if args.input is None:
        from app import ClipApp
        ClipApp().run()
        return 0

    try:
        scene = run_algorithm(read_input(args.input))
    except (InputError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 2

    for line in report(scene):
        print(line)

    if args.plot:
        from plotting import plot_scene
        plot_scene(scene, args.plot)
        logger.info('saved plot to %s', args.plot)
    return 0


if __name__ == '__main__':
    sys.exit(main())
