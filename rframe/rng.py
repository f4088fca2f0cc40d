"""
Random number source for rframe

Wraps numpy Generators so that concurrent callers never share generator
state. Each thread lazily receives its own generator spawned from a single
SeedSequence; a shared, lock-guarded generator is available as well.
"""
import logging
import threading
from typing import Optional

import numpy as np

from .exceptions import RandomSourceError

logger = logging.getLogger(__name__)

_default_source = None
_default_lock = threading.Lock()


class RandomSource:
    """
    Source of normally distributed samples
    """

    def __init__(self, seed: Optional[int] = None, thread_local: bool = True,
                 check_finite: bool = True):
        """
        Initialize the random source

        Args:
            seed: Seed for the root SeedSequence (None draws fresh OS entropy)
            thread_local: Give every thread its own generator
            check_finite: Raise RandomSourceError on NaN/Inf samples
        """
        self.thread_local = thread_local
        self.check_finite = check_finite
        self._lock = threading.RLock()
        self._local = threading.local()
        self._generation = 0
        self._shared = None
        self._seed_sequence = None
        self.reseed(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def reseed(self, seed: Optional[int] = None) -> None:
        """
        Restart every stream from a new seed

        Threads pick up the new seed the next time they draw.

        Args:
            seed: New root seed (None draws fresh OS entropy)
        """
        with self._lock:
            try:
                self._seed_sequence = np.random.SeedSequence(seed)
            except (TypeError, ValueError) as e:
                raise RandomSourceError(f"Invalid seed {seed!r}: {e}") from e
            self._seed = seed
            self._generation += 1
            self._shared = None
            logger.debug(f"Random source reseeded (seed={seed}, generation={self._generation})")

    def _spawn(self) -> np.random.Generator:
        # Caller holds self._lock
        child = self._seed_sequence.spawn(1)[0]
        return np.random.default_rng(child)

    def generator(self) -> np.random.Generator:
        """
        Get the generator for the calling thread

        Returns:
            numpy Generator
        """
        if not self.thread_local:
            with self._lock:
                if self._shared is None:
                    self._shared = self._spawn()
                return self._shared

        state = getattr(self._local, "state", None)
        if state is None or state[0] != self._generation:
            with self._lock:
                state = (self._generation, self._spawn())
            self._local.state = state
            logger.debug(f"Created random generator for thread {threading.current_thread().name}")
        return state[1]

    def normal(self, size: int, mean: float = 0.0, sd: float = 1.0) -> np.ndarray:
        """
        Draw independent samples from a normal distribution

        Args:
            size: Number of samples
            mean: Distribution mean
            sd: Distribution standard deviation

        Returns:
            float64 array of length size
        """
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 0:
            raise ValueError(f"size must be a non-negative integer, got {size!r}")
        if not np.isfinite(mean) or not np.isfinite(sd) or sd < 0:
            raise ValueError(f"Invalid normal parameters mean={mean!r}, sd={sd!r}")

        try:
            if self.thread_local:
                samples = self.generator().normal(mean, sd, size)
            else:
                with self._lock:
                    samples = self.generator().normal(mean, sd, size)
        except Exception as e:
            logger.error(f"Random source failed to draw {size} samples: {e}")
            raise RandomSourceError(f"Random source unavailable: {e}") from e

        samples = np.asarray(samples, dtype=np.float64)
        if self.check_finite and not np.all(np.isfinite(samples)):
            raise RandomSourceError("Random source produced non-finite samples")
        return samples


def get_random_source() -> RandomSource:
    """
    Get the process-wide random source, building it from the active configuration on first use
    """
    global _default_source
    with _default_lock:
        if _default_source is None:
            from .config import get_config
            config = get_config()
            _default_source = RandomSource(
                seed=config["seed"],
                thread_local=config["thread_local_random"],
                check_finite=config["check_finite"],
            )
        return _default_source


def set_random_source(source: Optional[RandomSource]) -> None:
    """
    Replace the process-wide random source. Passing None rebuilds it from configuration on next use.
    """
    global _default_source
    if source is not None and not isinstance(source, RandomSource):
        raise TypeError("source must be a RandomSource instance or None")
    with _default_lock:
        _default_source = source
