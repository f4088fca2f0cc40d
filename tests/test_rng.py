"""
Tests for the random source.
"""
import threading
import numpy as np
import pytest

from rframe import RandomSource, RandomSourceError, get_random_source, set_random_source


class TestRandomSource:
    """Tests for the RandomSource class."""

    def test_normal_draws(self):
        """Test shape and dtype of draws."""
        samples = RandomSource(seed=1).normal(3)
        assert samples.shape == (3,)
        assert samples.dtype == np.float64
        assert np.all(np.isfinite(samples))

    def test_reproducible(self):
        """Test that equal seeds reproduce draws."""
        assert np.array_equal(RandomSource(seed=5).normal(4), RandomSource(seed=5).normal(4))

    def test_reseed(self):
        """Test restarting the stream."""
        source = RandomSource(seed=5)
        first = source.normal(4)
        source.normal(4)
        source.reseed(5)
        assert np.array_equal(source.normal(4), first)

    def test_invalid_arguments(self):
        """Test argument validation."""
        source = RandomSource(seed=1)
        with pytest.raises(ValueError):
            source.normal(-1)
        with pytest.raises(ValueError):
            source.normal(3, sd=-1.0)
        with pytest.raises(ValueError):
            source.normal(3, mean=float("nan"))

    def test_invalid_seed(self):
        """Test that an unusable seed is a random source error."""
        with pytest.raises(RandomSourceError):
            RandomSource(seed=-5)

    def test_thread_local_generators(self):
        """Test that each thread draws from its own generator."""
        source = RandomSource(seed=8)
        generators = {}

        def record(name):
            generators[name] = source.generator()

        threads = [threading.Thread(target=record, args=(f"t{i}",)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len({id(g) for g in generators.values()}) == 4
        assert source.generator() is source.generator()

    def test_shared_generator(self):
        """Test the lock-guarded shared mode."""
        source = RandomSource(seed=8, thread_local=False)
        seen = []
        threads = [threading.Thread(target=lambda: seen.append(source.generator())) for _ in range(3)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert all(g is seen[0] for g in seen)
        assert source.normal(2).shape == (2,)

    def test_non_finite_allowed_when_disabled(self):
        """Test that check_finite=False passes NaN through."""
        class NanGenerator:
            def normal(self, mean, sd, size):
                return np.full(size, np.nan)

        source = RandomSource(seed=1, check_finite=False)
        source.generator = lambda: NanGenerator()
        assert np.all(np.isnan(source.normal(2)))


class TestDefaultSource:
    """Tests for the process-wide random source."""

    def test_singleton(self):
        """Test that the default source is reused."""
        assert get_random_source() is get_random_source()

    def test_replace(self):
        """Test replacing the default source."""
        source = RandomSource(seed=3)
        set_random_source(source)
        assert get_random_source() is source
        with pytest.raises(TypeError):
            set_random_source(object())
