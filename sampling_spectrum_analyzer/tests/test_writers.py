"""Tests for snapshot writers."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from sampling_spectrum_analyzer.analysis.radial import radial_mean_power
from sampling_spectrum_analyzer.export.writers import (
    pad_trial_index,
    read_power_image,
    snapshot_stem,
    write_power_image,
    write_radial_profile,
    write_snapshot,
)
from sampling_spectrum_analyzer.models.results import SpectrumSnapshot


def _snapshot(R: int = 16, trial: int = 3, n_trials: int = 100) -> SpectrumSnapshot:
    P = np.linspace(0.0, 2.0, R * R).reshape(R, R)
    return SpectrumSnapshot(
        sampler_type="jitter",
        n_points=64,
        trial=trial,
        n_trials=n_trials,
        mean_power=P,
        radial=radial_mean_power(P),
    )


def test_pad_trial_index() -> None:
    assert pad_trial_index(1, 1) == "1"
    assert pad_trial_index(3, 100) == "003"
    assert pad_trial_index(100, 100) == "100"
    assert pad_trial_index(42, 9) == "42"


def test_snapshot_stem() -> None:
    assert snapshot_stem("random", 256, 7, 1000) == "random-n256-0007"


def test_power_image_round_trip(tmp_path: Path) -> None:
    P = np.random.default_rng(0).random((8, 8)) * 5.0
    path = write_power_image(tmp_path / "p.tiff", P)
    back = read_power_image(path)
    assert back.shape == (8, 8)
    assert np.allclose(back, P.astype(np.float32))


def test_power_image_requires_2d(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        write_power_image(tmp_path / "p.tiff", np.ones(4))


def test_radial_table_format(tmp_path: Path) -> None:
    prof = radial_mean_power(np.full((16, 16), 0.5))
    path = write_radial_profile(tmp_path / "r.txt", prof, edge_trim=5)
    lines = path.read_text().splitlines()
    assert len(lines) == 8 - 5
    assert lines[0] == "0 0.500000000000000"
    assert lines[2].startswith("2 ")


def test_radial_table_no_trim(tmp_path: Path) -> None:
    prof = radial_mean_power(np.ones((8, 8)))
    path = write_radial_profile(tmp_path / "r.txt", prof, edge_trim=0)
    assert len(path.read_text().splitlines()) == 4


def test_write_snapshot_names(tmp_path: Path) -> None:
    paths = write_snapshot(_snapshot(), tmp_path)
    assert paths.image.name == "power-jitter-n64-003.tiff"
    assert paths.radial.name == "power-radial-mean-jitter-n64-003.txt"
    assert paths.image.exists() and paths.radial.exists()
    assert paths.image_png is None


def test_write_snapshot_png(tmp_path: Path) -> None:
    paths = write_snapshot(_snapshot(), tmp_path, png=True)
    assert paths.image_png is not None and paths.image_png.exists()
    assert paths.radial_png is not None and paths.radial_png.exists()
