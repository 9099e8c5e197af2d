from pathlib import Path

import numpy as np

from smc_kit.sampling.resampling import RESAMPLERS


class ScenarioConfig:
    """
    Container for the settings of an importance sampling + resampling run.
    """
    def __init__(
        self,
        n_particles: int = 400,
        seed: int = 42,
        resampler: str = "residual_importance",
        temperature: float = 1.0,
        experiment_name: str = "bimodal",
        log_dir="logs",
    ):
        self.n_particles = n_particles
        self.seed = seed
        self.resampler = resampler
        self.temperature = temperature
        self.experiment_name = experiment_name
        self.log_dir = Path(log_dir)

        if n_particles < 1:
            raise ValueError("Number of particles n_particles must be positive.")
        if temperature <= 0:
            raise ValueError("Temperature must be positive.")
        if resampler not in RESAMPLERS:
            raise ValueError(f"Unknown resampler '{resampler}'. Choose one of {sorted(RESAMPLERS)}.")

    def rng(self):
        """A fresh generator seeded with self.seed."""
        return np.random.default_rng(self.seed)
