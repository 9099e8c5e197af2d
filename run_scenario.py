import numpy as np

from smc_kit.scenarios.bimodal import run_bimodal_scenario
from smc_kit.sampling.resampling import RESAMPLERS
from smc_kit.sampling.statistics import radius_fractions
from smc_kit.utils.config import ScenarioConfig
from smc_kit.utils.log import setup_logging

config = ScenarioConfig(n_particles=400, seed=42)
logger = setup_logging(config)

# =================================================
# Same particles, every resampler
# =================================================

for name in RESAMPLERS:
    config.resampler = name
    result = run_bimodal_scenario(config, logger)

    counts = result.particles.offspring_counts()
    radii = radius_fractions(result.particles)

    # Particles carrying most of the mass
    top = np.argsort(radii)[::-1][:5]
    for i in top:
        p = result.particles[i]
        logger.info(f"[{name}] x = {p.x:+.3f}  radius = {radii[i]:.3f}  copies = {counts[i]}")
