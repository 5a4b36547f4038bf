import logging
import time
from os import path

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logging(level: int = logging.INFO):
    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)


def get_relative_path(module: str, path_name: str) -> str:
    return path.abspath(path.join(path.dirname(module), path_name))


def timeit(method):
    def timed(*args, **kw):
        ts = time.perf_counter()
        result = method(*args, **kw)
        te = time.perf_counter()
        logger.debug("%s elapsed time: %f sec", method.__qualname__, (te - ts))
        return result

    timed.__qualname__ = method.__qualname__
    timed.__doc__ = method.__doc__
    return timed


class Numbers:
    current: int

    def __init__(self):
        self.current = 0

    def __iter__(self) -> 'Numbers':
        return self

    def __next__(self) -> int:
        self.current += 1
        return self.current

    def next(self) -> int:
        return next(self)
