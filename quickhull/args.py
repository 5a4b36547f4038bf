import argparse

from quickhull import constants, util

DEFAULT_DATA_FILE = util.get_relative_path(__file__, constants.DATA_FILE)


def parse_args(argv=None):
    parser = argparse.ArgumentParser("quickhull")
    parser.add_argument("--datafile", type=str, default=DEFAULT_DATA_FILE,
                        help=f"TSPLIB point file, or '{constants.STDIN_MARKER}'"
                             " to read a count and x y pairs from stdin")
    parser.add_argument("--show", action="store_true")
    parser.add_argument("--save", type=str, default=None)
    parser.add_argument("--verbose", action="store_true")
    parsed, _ = parser.parse_known_args(argv)
    return parsed
