import pytest

from models import (
    STATUS_COMPLETED, STATUS_FAILED, STATUS_RUNNING, STATUS_NOT_RUNNING,
)
from random_source import RandomSource

from conftest import FixedRandom


@pytest.mark.parametrize("value, expected", [
    (0.0, STATUS_COMPLETED),
    (0.69, STATUS_COMPLETED),
    (0.7, STATUS_FAILED),
    (0.89, STATUS_FAILED),
    (0.9, STATUS_RUNNING),
    (0.949, STATUS_RUNNING),
    (0.95, STATUS_NOT_RUNNING),
    (0.999, STATUS_NOT_RUNNING),
])
def test_weighted_status_thresholds(value, expected):
    src = RandomSource(rng=FixedRandom([value]))
    assert src.weighted_status() == expected


def test_weighted_tier_split():
    assert RandomSource(rng=FixedRandom([0.5])).weighted_tier() == "Tier 2"
    assert RandomSource(rng=FixedRandom([0.7])).weighted_tier() == "Tier 3"


def test_randint_and_between_ranges(rng):
    for _ in range(500):
        assert 0 <= rng.randint(10) < 10
        assert 30 <= rng.between(30, 150) < 150


def test_choice_covers_last_element():
    src = RandomSource(rng=FixedRandom([0.999]))
    assert src.choice(["a", "b", "c"]) == "c"


def test_same_seed_same_draws():
    a = RandomSource(seed=99)
    b = RandomSource(seed=99)
    assert [a.randint(1000) for _ in range(20)] == [b.randint(1000) for _ in range(20)]


def test_identifier_format():
    src = RandomSource(rng=FixedRandom([0.5]))
    assert src.identifier("JOB") == "JOB-500000000"


def test_identifier_redraws_on_collision():
    src = RandomSource(rng=FixedRandom([0.5, 0.5, 0.25]))
    assert src.identifier("JOB") == "JOB-500000000"
    assert src.identifier("JOB") == "JOB-250000000"


def test_identifiers_unique_across_many_draws():
    src = RandomSource(seed=11)
    ids = [src.identifier("JOB", digits=2) for _ in range(100)]
    assert len(set(ids)) == 100
