"""Tests for the shared uniform source."""

import numpy as np
import pytest

from normvar.errors import InvalidArgument
from normvar.generators.uniform_source import UniformSource, as_source


class TestUniformSource:
    """Test suite for UniformSource."""

    def test_draw_shape_and_range(self):
        """Draws lie in [0, 1) and have the requested length."""
        u = UniformSource(0).draw(10_000)
        assert u.shape == (10_000,)
        assert np.all(u >= 0.0) and np.all(u < 1.0)

    def test_draw_zero_is_empty(self):
        assert UniformSource(0).draw(0).shape == (0,)

    @pytest.mark.parametrize("count", [-1, 2.5, "3", True, None])
    def test_invalid_count(self, count):
        with pytest.raises(InvalidArgument):
            UniformSource(0).draw(count)

    def test_numpy_integer_count(self):
        assert len(UniformSource(0).draw(np.int64(5))) == 5

    def test_same_seed_same_draws(self):
        np.testing.assert_array_equal(
            UniformSource(7).draw(100), UniformSource(7).draw(100)
        )

    def test_successive_draws_do_not_overlap(self):
        """Each call advances the stream."""
        source = UniformSource(7)
        first = source.draw(100)
        second = source.draw(100)
        assert not np.array_equal(first, second)

        # Two draws of 50 + 50 continue the same stream as one draw of 100.
        whole = UniformSource(11).draw(100)
        split = UniformSource(11)
        np.testing.assert_array_equal(
            np.concatenate([split.draw(50), split.draw(50)]), whole
        )

    def test_exponential_is_inverse_cdf(self):
        u = UniformSource(3).draw(1000)
        y = UniformSource(3).exponential(1000)
        np.testing.assert_allclose(y, -np.log(1.0 - u))
        assert np.all(np.isfinite(y)) and np.all(y >= 0.0)

    def test_exponential_mean(self):
        y = UniformSource(3).exponential(200_000)
        assert abs(y.mean() - 1.0) < 0.01

    def test_signs(self):
        signs = UniformSource(5).signs(100_000)
        assert set(np.unique(signs)) <= {-1.0, 0.0, 1.0}
        assert abs(np.mean(signs < 0) - 0.5) < 0.01

    def test_normal_reference(self):
        z = UniformSource(5).normal(50_000, mu=2.0, sigma=3.0)
        assert abs(z.mean() - 2.0) < 0.1
        assert abs(z.std() - 3.0) < 0.1

    def test_existing_generator_is_shared(self):
        rng = np.random.default_rng(1)
        source = UniformSource(rng)
        assert source.rng is rng

    def test_spawn_is_reproducible_and_independent(self):
        children_a = UniformSource(9).spawn(3)
        children_b = UniformSource(9).spawn(3)
        assert len(children_a) == 3
        for a, b in zip(children_a, children_b):
            np.testing.assert_array_equal(a.draw(10), b.draw(10))

        draws = [child.draw(10) for child in UniformSource(9).spawn(3)]
        assert not np.array_equal(draws[0], draws[1])
        assert not np.array_equal(draws[1], draws[2])


class TestAsSource:
    def test_returns_given_source(self):
        source = UniformSource(0)
        assert as_source(source) is source

    def test_builds_from_seed(self):
        np.testing.assert_array_equal(
            as_source(random_state=4).draw(5), UniformSource(4).draw(5)
        )

    def test_rejects_both(self):
        with pytest.raises(InvalidArgument, match="either source or random_state"):
            as_source(UniformSource(0), random_state=1)
