"""Tests for SpectrumProfile."""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path

import pytest

from sampling_spectrum_analyzer.analysis.fourier import FrequencyGrid
from sampling_spectrum_analyzer.models.profile import SpectrumProfile


# -----------------------------------------------------------------------
# Basic construction
# -----------------------------------------------------------------------


def test_profile_defaults() -> None:
    p = SpectrumProfile(sample_counts=(64, 256), n_trials=10)
    assert p.sample_counts == (64, 256)
    assert p.n_trials == 10
    assert p.trial_step_out == 1
    assert p.frequency_step == 1.0
    assert p.resolution == 512
    assert p.sampler == "random"
    assert p.seed is None
    assert p.tile_size == 16
    assert p.max_workers is None
    assert p.edge_trim == 5


def test_profile_list_counts_become_tuple() -> None:
    p = SpectrumProfile(sample_counts=[1, 2], n_trials=1)  # type: ignore[arg-type]
    assert p.sample_counts == (1, 2)


def test_profile_frozen() -> None:
    p = SpectrumProfile(sample_counts=(4,), n_trials=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.n_trials = 3  # type: ignore[misc]


def test_profile_replace() -> None:
    p = SpectrumProfile(sample_counts=(4,), n_trials=1)
    p2 = dataclasses.replace(p, frequency_step=0.5)
    assert p2.frequency_step == 0.5
    assert p2.sample_counts == (4,)


def test_profile_grid() -> None:
    p = SpectrumProfile(sample_counts=(4,), n_trials=1, resolution=64, frequency_step=0.25)
    assert p.grid == FrequencyGrid(resolution=64, step=0.25)


# -----------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------


def test_validate_ok() -> None:
    SpectrumProfile(sample_counts=(0, 16), n_trials=1).validate()


@pytest.mark.parametrize(
    "overrides",
    [
        dict(sample_counts=()),
        dict(sample_counts=(-1,)),
        dict(n_trials=0),
        dict(trial_step_out=0),
        dict(frequency_step=0.0),
        dict(frequency_step=float("inf")),
        dict(frequency_step=float("nan")),
        dict(n_trials=2.5),
        dict(sample_counts=(16.0,)),
        dict(resolution=32.0),
        dict(trial_step_out=True),
        dict(resolution=31),
        dict(resolution=0),
        dict(tile_size=0),
        dict(max_workers=0),
        dict(edge_trim=-1),
    ],
)
def test_validate_rejects(overrides) -> None:
    base = dict(sample_counts=(16,), n_trials=4)
    base.update(overrides)
    p = SpectrumProfile(**base)
    with pytest.raises(ValueError):
        p.validate()


def test_validate_lists_all_problems() -> None:
    p = SpectrumProfile(sample_counts=(16,), n_trials=0, trial_step_out=0)
    assert len(p.problems()) == 2


# -----------------------------------------------------------------------
# Serialization
# -----------------------------------------------------------------------


def test_dict_round_trip() -> None:
    p = SpectrumProfile(sample_counts=(16, 64), n_trials=8, trial_step_out=4, seed=3, sampler="jitter")
    d = p.to_dict()
    assert d["sample_counts"] == [16, 64]
    json.dumps(d)
    assert SpectrumProfile.from_dict(d) == p


def test_json_file_round_trip(tmp_path: Path) -> None:
    p = SpectrumProfile(sample_counts=(9,), n_trials=2, resolution=32)
    path = p.save_json(tmp_path / "sub" / "profile.json")
    assert path.exists()
    assert SpectrumProfile.load_json(path) == p


def test_from_dict_keeps_non_integer_counts_for_validation() -> None:
    p = SpectrumProfile.from_dict({"sample_counts": [4.7], "n_trials": 1})
    assert p.sample_counts == (4.7,)
    with pytest.raises(ValueError, match="sample_counts"):
        p.validate()


def test_infinite_step_message() -> None:
    p = SpectrumProfile(sample_counts=(4,), n_trials=1, frequency_step=float("inf"))
    assert p.problems() == ["frequency_step must be finite and > 0, got inf"]
