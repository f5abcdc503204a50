import threading
import time
from enum import Enum

from .log import logger
from .settings import SWAP_DELAY_MS

SWAP_DELAY = SWAP_DELAY_MS / 1000.0


class SortDirection(Enum):
    DESCENDING = "descending"
    ASCENDING  = "ascending"

    def flipped(self):
        if self is SortDirection.DESCENDING:
            return SortDirection.ASCENDING
        return SortDirection.DESCENDING


INITIAL_DIRECTION = SortDirection.DESCENDING

# ============================================================
# ===================== SORTING ALGORITHM ====================
# ============================================================

def quick_sort(arr, direction=INITIAL_DIRECTION):
    """
    Lomuto quicksort, in place. Yields (arr, [i, j]) after every swap,
    self swaps and the pivot swap included.

    Ranges come off an explicit stack with the low side on top, so the swap
    order matches the plain recursive version.
    """
    desc  = direction is SortDirection.DESCENDING
    stack = [(0, len(arr) - 1)]
    while stack:
        lo, hi = stack.pop()
        if lo >= hi: continue
        pivot = arr[hi]; i = lo - 1
        for j in range(lo, hi):
            if (arr[j] > pivot) if desc else (arr[j] < pivot):
                i += 1; arr[i], arr[j] = arr[j], arr[i]; yield arr, [i, j]
        arr[i+1], arr[hi] = arr[hi], arr[i+1]; yield arr, [i+1, hi]
        stack.append((i+2, hi))
        stack.append((lo, i))


def run(sequence, direction, on_swap, delay=SWAP_DELAY, sleep=time.sleep):
    """
    Sort ``sequence`` in place, calling ``on_swap(snapshot)`` then pausing
    ``delay`` seconds after every swap. Returns the direction for the next run.
    """
    swaps = 0
    for state, _active in quick_sort(sequence, direction):
        swaps += 1
        on_swap(list(state))
        sleep(delay)
    logger.info(f"Sorted {len(sequence)} numbers {direction.value}",
                component="SORT", details=f"{swaps} swaps")
    return direction.flipped()


class SortWorker(threading.Thread):
    """Runs one animated sort off the UI thread."""

    def __init__(self, sequence, direction, on_swap, on_done=None,
                 delay=SWAP_DELAY, sleep=time.sleep):
        super().__init__(name="sort-worker", daemon=True)
        self.sequence  = sequence
        self.direction = direction
        self.on_swap   = on_swap
        self.on_done   = on_done
        self.delay     = delay
        self._sleep    = sleep
        self.next_direction = None
        self.error = None

    def run(self):
        logger.info(f"Sort started ({self.direction.value})", component="SORT")
        try:
            self.next_direction = run(self.sequence, self.direction, self.on_swap,
                                      self.delay, self._sleep)
        except Exception as e:
            self.error = e
            logger.error("Sort aborted", component="SORT", details=repr(e))
            raise
        finally:
            # next_direction stays None when the sort did not finish
            if self.on_done:
                self.on_done(self.next_direction)
