import numpy as np

from .log import logger
from .settings import VALUE_MIN, VALUE_MAX, RESEED_THRESHOLD


def generate(count, rng=None):
    """
    Return ``count`` random ints drawn uniformly from [VALUE_MIN, VALUE_MAX].

    At least one value is guaranteed to be <= RESEED_THRESHOLD so there is
    always something clickable to reseed with. ``count`` must be >= 1.
    """
    if rng is None:
        rng = np.random.default_rng()
    values = np.asarray(rng.integers(VALUE_MIN, VALUE_MAX + 1, size=count))
    if not np.any(values <= RESEED_THRESHOLD) and count > 0:
        idx = int(rng.integers(count))
        values[idx] = rng.integers(VALUE_MIN, RESEED_THRESHOLD + 1)
        logger.debug(f"Forced small value at index {idx}", component="GEN")
    seq = [int(v) for v in values]
    logger.info(f"Generated {count} numbers", component="GEN")
    return seq
