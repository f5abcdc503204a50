import threading

from .errors import InvalidCount, NothingToSort, SelectionTooLarge, SortInProgress
from .generator import generate
from .log import logger
from .settings import MAX_COUNT, RESEED_THRESHOLD
from .sorter import INITIAL_DIRECTION, SWAP_DELAY, SortWorker


def parse_count(text, max_count=MAX_COUNT):
    """Parse the intro screen entry. Raises InvalidCount on anything but 1..max_count."""
    try:
        count = int(str(text).strip())
    except ValueError:
        raise InvalidCount() from None
    if count <= 0:
        raise InvalidCount()
    if count > max_count:
        raise InvalidCount(f"Please enter a number between 1 and {max_count}.")
    return count


class SortSession:
    """
    Owns the displayed sequence and the direction of the next sort.

    Only one sort may be in flight. While it runs, every request that would
    replace the sequence is refused with SortInProgress, so the worker is the
    only thing touching the list.
    """

    def __init__(self, rng=None, delay=SWAP_DELAY, sleep=None):
        self.sequence  = None
        self.direction = INITIAL_DIRECTION
        self.rng       = rng
        self.delay     = delay
        self._sleep    = sleep
        self._worker   = None
        self._lock     = threading.Lock()
        self._sorting  = False

    @property
    def sorting(self):
        with self._lock:
            return self._sorting

    def _check_idle(self):
        if self.sorting:
            raise SortInProgress()

    def start(self, count):
        self._check_idle()
        self.sequence = generate(count, self.rng)
        return self.sequence

    def reseed(self, value):
        """Regenerate with ``value`` numbers if it is small enough to be a reseed trigger."""
        self._check_idle()
        if value > RESEED_THRESHOLD:
            logger.info(f"Rejected reseed with {value}", component="GEN")
            raise SelectionTooLarge()
        logger.info(f"Reseeding with {value} numbers", component="GEN")
        self.sequence = generate(value, self.rng)
        return self.sequence

    def sort(self, on_swap, on_done=None):
        if self.sequence is None:
            raise NothingToSort()
        with self._lock:
            if self._sorting:
                raise SortInProgress()
            self._sorting = True

        def _finished(next_direction):
            if next_direction is not None:
                self.direction = next_direction
            with self._lock:
                self._sorting = False
            if on_done:
                on_done(next_direction)

        kwargs = {} if self._sleep is None else {"sleep": self._sleep}
        self._worker = SortWorker(self.sequence, self.direction, on_swap,
                                  _finished, self.delay, **kwargs)
        self._worker.start()
        return self._worker

    def join(self, timeout=None):
        if self._worker:
            self._worker.join(timeout)
