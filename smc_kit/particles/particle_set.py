import numpy as np

from smc_kit.utils.errors import EmptyInputError


class Particle:
    """
    A weighted sample location.

    Attributes:
        x (float): Sample location.
        logweight (float): Log importance weight. -inf means zero weight.
        logq (float or None): Proposal log-density at x (diagnostic).
        logp (float or None): Target log-density at x (diagnostic).
        density (Distribution or None): Density the current weight is relative to.
        parent (int or None): Index of the source particle in the previous generation.
        children (list): Particles resampled from this one.
    """
    def __init__(self, x: float, logweight: float = 0.0, logq=None, logp=None, density=None, parent=None):
        if np.isnan(logweight):
            raise ValueError("Particle log-weight must not be NaN.")

        self.x = x
        self.logweight = logweight
        self.logq = logq
        self.logp = logp
        self.density = density
        self.parent = parent
        self.children = []

    def spawn(self, logweight: float, parent: int):
        """
        Create a child particle at the same location and register it in self.children.
        """
        child = Particle(
            self.x,
            logweight=logweight,
            logq=self.logq,
            logp=self.logp,
            density=self.density,
            parent=parent,
        )
        self.children.append(child)
        return child

    def __repr__(self):
        return f"Particle(x={self.x}, logweight={self.logweight}, n_children={len(self.children)})"


class ParticleSet:
    """
    Ordered generation of particles.

    A resampled generation keeps the index of each particle's parent in
    ancestor_indices and a reference to the generation it was drawn from,
    so lineage can be walked without references from children to parent objects.
    """
    def __init__(self, particles, ancestor_indices=None, source=None):
        particles = list(particles)
        if len(particles) == 0:
            raise EmptyInputError("A ParticleSet must contain at least one particle.")

        if ancestor_indices is None:
            ancestor_indices = np.array([], dtype=int)
        else:
            ancestor_indices = np.asarray(ancestor_indices, dtype=int)
            if ancestor_indices.shape != (len(particles),):
                raise ValueError("ancestor_indices must have one entry per particle.")

        self.particles = particles
        self.ancestor_indices = ancestor_indices
        self.source = source

    def __len__(self):
        return len(self.particles)

    def __iter__(self):
        return iter(self.particles)

    def __getitem__(self, i):
        return self.particles[i]

    @property
    def xs(self):
        return np.array([p.x for p in self.particles], dtype=float)

    @property
    def logweights(self):
        return np.array([p.logweight for p in self.particles], dtype=float)

    def offspring_counts(self):
        """
        Number of children recorded on each particle, in order.
        """
        return np.array([len(p.children) for p in self.particles], dtype=int)

    def children_of(self, i):
        """
        Indices in this generation whose parent is particle i of the source generation.
        """
        return np.flatnonzero(self.ancestor_indices == i)

    def lineage(self, i):
        """
        Trace particle i back to the first generation.

        Returns
        -------
        path : list of Particle
            Ancestors from the first generation down to particle i.
        """
        path = [self.particles[i]]
        generation, idx = self, i
        while generation.source is not None:
            idx = int(generation.ancestor_indices[idx])
            generation = generation.source
            path.append(generation.particles[idx])
        return path[::-1]

    def __repr__(self):
        return f"ParticleSet(n={len(self)}, resampled={self.source is not None})"
