import pytest

from benchcore.stats import statistics_mean, statistics_median, statistics_stddev


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([42, 42, 42, 42], 42.0),
        ([1, 2, 3, 4], 2.5),
        ([1, 2, 5, 10, 10, 14], 7.0),
    ],
)
def test_mean(values, expected):
    assert statistics_mean(values) == pytest.approx(expected, rel=1e-12)


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([42, 42, 42, 42], 42.0),
        ([1, 2, 3, 4], 2.5),
        ([1, 2, 5, 10, 10], 5.0),
    ],
)
def test_median(values, expected):
    assert statistics_median(values) == pytest.approx(expected, rel=1e-12)


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([101, 101, 101, 101], 0.0),
        ([1, 2, 3], 1.0),
        ([2.5, 2.4, 3.3, 4.2, 5.1], 1.151086443322134),
    ],
)
def test_stddev(values, expected):
    assert statistics_stddev(values) == pytest.approx(expected, rel=1e-12, abs=1e-12)


def test_mean_of_empty_is_zero():
    assert statistics_mean([]) == 0.0


def test_median_of_empty_is_zero():
    assert statistics_median([]) == 0.0


def test_stddev_of_empty_is_zero():
    assert statistics_stddev([]) == 0.0


def test_stddev_of_single_sample_is_zero():
    assert statistics_stddev([7.5]) == 0.0


def test_median_with_two_samples_is_mean():
    assert statistics_median([3.0, 9.0]) == statistics_mean([3.0, 9.0])


def test_median_does_not_reorder_input():
    values = [5.0, 1.0, 4.0, 2.0, 3.0]
    snapshot = list(values)
    assert statistics_median(values) == 3.0
    assert values == snapshot


def test_median_unsorted_even_count():
    assert statistics_median([4, 1, 3, 2]) == 2.5


def test_stddev_never_negative():
    assert statistics_stddev([0.1, 0.1, 0.1]) >= 0.0