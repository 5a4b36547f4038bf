import logging
import sys
import typing as t
from os import path

from quickhull import args, constants, data, graph, hull, util

logger = logging.getLogger(__name__)


def load_points(datafile: str) -> t.Tuple[t.Optional[str], data.PointSet]:
    if datafile == constants.STDIN_MARKER:
        return None, data.read_points(sys.stdin)
    return data.load_datafile(datafile)


def print_hull(result: data.HullResult, out: t.Optional[t.TextIO] = None):
    out = out or sys.stdout
    print(constants.HULL_HEADER, file=out)
    for p in result:
        print(data.format_point(p), file=out)


def draw_map(name: t.Optional[str], points: data.PointSet,
             result: data.HullResult):
    m = graph.Map(f'{name or "points"} hull')
    m.draw_points(points)
    m.draw_hull(result)
    return m


@util.timeit
def run(startup_args) -> data.HullResult:
    logger.info('Loading %s', startup_args.datafile)
    name, points = load_points(startup_args.datafile)
    result = hull.compute_hull(points)
    logger.info('Selected %s of %s points', len(result), len(points))
    print_hull(result)
    if startup_args.show or startup_args.save:
        m = draw_map(name, points, result)
        if startup_args.save:
            _, ext = path.splitext(startup_args.save)
            m.save(startup_args.save, ext.lstrip(".") or "png")
        if startup_args.show:
            m.show()
    return result


def main(argv=None) -> int:
    startup_args = args.parse_args(argv)
    util.setup_logging(logging.DEBUG if startup_args.verbose
                       else logging.INFO)
    try:
        run(startup_args)
    except (OSError, ValueError) as e:
        logger.error('Unable to compute hull: %s', e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
