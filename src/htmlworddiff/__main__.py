# -*- coding: utf-8 -*-
"""
Print the diff of two HTML files::

    python -m htmlworddiff old.html new.html
"""
import argparse
import logging
import sys

from .differ import HtmlDiff


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='htmlworddiff',
        description='Word level diff of two HTML fragments.')
    parser.add_argument('old', help='path of the old version')
    parser.add_argument('new', help='path of the new version')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log diff statistics to stderr')
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(asctime)s %(levelname)s %(message)s')

    with open(args.old, encoding='utf-8') as f:
        old = f.read()
    with open(args.new, encoding='utf-8') as f:
        new = f.read()

    differ = HtmlDiff(old, new)
    changed = differ.compute_diff()
    sys.stdout.write(differ.build_diff_page())
    sys.stdout.write('\n')
    return 1 if changed else 0


if __name__ == '__main__':
    sys.exit(main())
