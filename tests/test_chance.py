from unittest.mock import patch

import pytest

from naiasocket.chance import gen_bool, gen_range_float, gen_range_int


def test_float_samples_stay_in_range():
    samples = [gen_range_float(0.0, 1.0) for _ in range(2000)]
    assert all(0.0 <= s < 1.0 for s in samples)


def test_float_uses_lower_bound_offset():
    samples = [gen_range_float(10.0, 12.5) for _ in range(500)]
    assert min(samples) >= 10.0
    assert max(samples) < 12.5


def test_float_midpoint_with_fixed_source():
    with patch("random.random", return_value=0.5):
        assert gen_range_float(2.0, 4.0) == 3.0


def test_float_empty_range_raises():
    with pytest.raises(ValueError):
        gen_range_float(1.0, 1.0)
    with pytest.raises(ValueError):
        gen_range_float(2.0, 1.0)


def test_int_samples_stay_in_range():
    samples = {gen_range_int(0, 5) for _ in range(2000)}
    assert samples <= {0, 1, 2, 3, 4}
    assert 5 not in samples


def test_int_covers_range():
    samples = {gen_range_int(3, 6) for _ in range(2000)}
    assert samples == {3, 4, 5}


def test_int_single_value_range():
    assert gen_range_int(7, 8) == 7


def test_int_empty_range_raises():
    with pytest.raises(ValueError):
        gen_range_int(4, 4)


def test_bool_follows_source():
    with patch("random.random", return_value=0.25):
        assert gen_bool() is True
    with patch("random.random", return_value=0.75):
        assert gen_bool() is False


def test_bool_yields_both_values():
    assert {gen_bool() for _ in range(500)} == {True, False}