"""Tests for the reference point samplers and the registry."""

from __future__ import annotations

import numpy as np
import pytest

from sampling_spectrum_analyzer.samplers import (
    PointSampler,
    RandomSampler,
    create_sampler,
    list_samplers,
    register_sampler,
)


def test_registry_lists_builtin_samplers() -> None:
    names = list_samplers()
    for name in ("random", "jitter", "nrooks", "regular"):
        assert name in names


def test_create_unknown_sampler_raises() -> None:
    with pytest.raises(KeyError):
        create_sampler("does-not-exist")


def test_register_requires_sample_type() -> None:
    class Nameless(PointSampler):
        pass

    with pytest.raises(ValueError):
        register_sampler(Nameless)


@pytest.mark.parametrize("name", ["random", "jitter", "nrooks", "regular"])
@pytest.mark.parametrize("count", [0, 1, 16, 64])
def test_exact_count_in_unit_square(name: str, count: int) -> None:
    s = create_sampler(name, seed=42)
    pts = s.sample(count)
    assert pts.shape == (count, 2)
    assert pts.dtype == np.float64
    assert np.all(pts >= 0.0) and np.all(pts < 1.0)


@pytest.mark.parametrize("name", ["jitter", "regular"])
def test_stratified_needs_square_count(name: str) -> None:
    with pytest.raises(ValueError):
        create_sampler(name).sample(10)


def test_negative_count_rejected() -> None:
    with pytest.raises(ValueError):
        RandomSampler(seed=0).sample(-1)


def test_jitter_one_point_per_cell() -> None:
    k = 8
    pts = create_sampler("jitter", seed=1).sample(k * k)
    cells = np.floor(pts * k).astype(int)
    keys = cells[:, 1] * k + cells[:, 0]
    assert np.array_equal(np.sort(keys), np.arange(k * k))


def test_nrooks_one_point_per_row_and_column() -> None:
    n = 37
    pts = create_sampler("nrooks", seed=2).sample(n)
    assert np.array_equal(np.sort(np.floor(pts[:, 0] * n).astype(int)), np.arange(n))
    assert np.array_equal(np.sort(np.floor(pts[:, 1] * n).astype(int)), np.arange(n))


def test_regular_is_cell_centres() -> None:
    pts = create_sampler("regular").sample(4)
    assert np.allclose(pts, [[0.25, 0.25], [0.75, 0.25], [0.25, 0.75], [0.75, 0.75]])


def test_fresh_points_each_call_and_seed_reproducible() -> None:
    a = create_sampler("random", seed=7)
    b = create_sampler("random", seed=7)
    p1 = a.sample(10)
    p2 = a.sample(10)
    assert not np.allclose(p1, p2)
    assert np.allclose(p1, b.sample(10))


def test_check_count_matches_arity_contract() -> None:
    create_sampler("random").check_count(10)
    create_sampler("nrooks").check_count(10)
    for name in ("jitter", "regular"):
        s = create_sampler(name)
        s.check_count(0)
        s.check_count(49)
        with pytest.raises(ValueError):
            s.check_count(50)
    with pytest.raises(ValueError):
        create_sampler("random").check_count(-3)
