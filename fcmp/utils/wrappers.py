import logging
import time
from collections.abc import Generator
from contextlib import contextmanager

log = logging.getLogger(__name__)


@contextmanager
def time_it(func_name: str) -> Generator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        end = time.perf_counter()
        log.debug("%s took %s seconds", func_name, f"{end - start:.2f}")
