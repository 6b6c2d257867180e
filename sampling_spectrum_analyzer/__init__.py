"""Sampling Spectrum Analyzer -- Fourier power spectra of 2D point samplers.

Measures the spectral quality of Monte Carlo and stratified sampling patterns
(white noise, jittered, N-rooks, blue noise, ...).

This package provides tools for:
- Computing the continuous Fourier transform of arbitrary 2D point sets
- Normalising it into a periodogram (power / point count)
- Averaging power spectra over many independent trials
- Reducing the mean spectrum to a radial profile
- Writing spectrum images and radial profile tables per snapshot

Key principles:
- No resampling: points are transformed where they are, by direct summation
- Unbiased averaging: the mean at trial T weights all T realizations equally
- No hidden state: every per-trial buffer is allocated fresh

Main subpackages:
- analysis: Fourier transform, power, accumulation, radial profile, trial loop
- samplers: Reference point samplers and the sampler registry
- models: Run configuration (SpectrumProfile) and snapshot results
- export: Image/text writers and PNG previews
"""

__all__ = []
