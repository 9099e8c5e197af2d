from abc import ABC, abstractmethod


class Distribution(ABC):
    """
    Univariate continuous distribution:
        x ~ p(x)
    evaluated through log p(x).
    """

    @abstractmethod
    def sample(self, rng=None):
        """
        Draw one value x ~ p(x) using the random generator rng.
        """
        pass

    @abstractmethod
    def log_density(self, x):
        """
        Compute log p(x). Points of zero density give -inf.
        """
        pass
