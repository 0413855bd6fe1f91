"""Spherical noise and a default elevation sampler.

Noise is evaluated on points of the unit sphere, so it wraps seamlessly.
Both signals are driven by an :class:`ElevationConfig`; the
:class:`ElevationSampler` built on them is the ``sample`` callable that
:func:`~worldgrid.metrics.compute_metrics` expects, for callers that have
no planetary model of their own.

Functions
---------
- :func:`fbm_3d` — fractal sum of simplex octaves, in ``[-1, 1]``
- :func:`ridged_noise_3d` — inverted-abs octaves that form sharp ridges, in ``[0, 1]``
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import lru_cache
from typing import Iterator, Tuple

from opensimplex import OpenSimplex

from .models import Vec3


@lru_cache(maxsize=32)
def _generator(seed: int) -> OpenSimplex:
    return OpenSimplex(seed=seed)


# ═══════════════════════════════════════════════════════════════════
# Configuration
# ═══════════════════════════════════════════════════════════════════

@dataclass
class ElevationConfig:
    """Parameters for :class:`ElevationSampler`.

    Attributes
    ----------
    max_elevation : float
        Highest possible elevation, in metres above sea level.
    sea_level_fraction : float
        Deepest point below sea level as a fraction of *max_elevation*.
    octaves, lacunarity, persistence, frequency : float
        Octave count, per-octave frequency gain, per-octave weight decay
        and base frequency.  Shared by the base and ridge signals.
    ridge_blend : float
        Weight of ridged noise mixed into land (0 = smooth continents,
        1 = all ridges).
    seed : int
        Noise seed.
    """

    max_elevation: float = 8848.0
    sea_level_fraction: float = 1.0
    octaves: int = 6
    lacunarity: float = 2.0
    persistence: float = 0.5
    frequency: float = 1.2
    ridge_blend: float = 0.3
    seed: int = 42


EARTHLIKE = ElevationConfig()

ROUGH = ElevationConfig(
    max_elevation=12000.0,
    sea_level_fraction=0.6,
    octaves=7,
    persistence=0.6,
    frequency=2.0,
    ridge_blend=0.7,
)


# ═══════════════════════════════════════════════════════════════════
# Noise signals
# ═══════════════════════════════════════════════════════════════════

def _octaves(v: Vec3, config: ElevationConfig) -> Iterator[Tuple[float, float]]:
    """Yield ``(weight, noise)`` per octave, where weight is ``persistence**i``."""
    gen = _generator(config.seed)
    x, y, z = v
    freq = config.frequency
    weight = 1.0
    for _ in range(config.octaves):
        yield weight, gen.noise3(x * freq, y * freq, z * freq)
        freq *= config.lacunarity
        weight *= config.persistence


def fbm_3d(v: Vec3, config: ElevationConfig = EARTHLIKE) -> float:
    """Weighted mean of the octaves of *config* at *v*."""
    total = norm = 0.0
    for weight, value in _octaves(v, config):
        total += weight * value
        norm += weight
    if norm == 0:
        return 0.0
    return max(-1.0, min(1.0, total / norm))


def ridged_noise_3d(v: Vec3, config: ElevationConfig = EARTHLIKE, ridge_offset: float = 1.0) -> float:
    """Ridged multifractal at *v*.

    Each octave is folded to ``(ridge_offset - |n|)**2`` and damped by the
    previous octave's ridge, so detail gathers along the crests.
    """
    total = norm = 0.0
    damping = 1.0
    for weight, value in _octaves(v, config):
        ridge = (ridge_offset - abs(value)) ** 2 * damping
        damping = max(0.0, min(1.0, ridge * config.persistence))
        total += weight * ridge
        norm += weight
    if norm == 0:
        return 0.0
    return max(0.0, min(1.0, total / norm))


# ═══════════════════════════════════════════════════════════════════
# Elevation sampler
# ═══════════════════════════════════════════════════════════════════

@dataclass
class ElevationSampler:
    """Callable ``(unit_vector) -> elevation`` built from spherical noise.

    Output lies in ``[-max_elevation * sea_level_fraction, max_elevation]``
    and is fully determined by the config.  Land mixes in ridges sampled
    at twice the base frequency with an offset seed.
    """

    config: ElevationConfig = field(default_factory=ElevationConfig)

    @property
    def ridge_config(self) -> ElevationConfig:
        cfg = self.config
        return replace(cfg, frequency=cfg.frequency * 2.0, seed=cfg.seed + 100)

    def __call__(self, v: Vec3) -> float:
        cfg = self.config
        base = fbm_3d(v, cfg)
        if base <= 0:
            return base * cfg.max_elevation * cfg.sea_level_fraction

        ridges = ridged_noise_3d(v, self.ridge_config)
        land = base * (1.0 - cfg.ridge_blend + cfg.ridge_blend * ridges)
        return land * cfg.max_elevation
