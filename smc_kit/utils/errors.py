class SMCKitError(Exception):
    """Base class for errors raised by smc_kit."""


class EmptyInputError(SMCKitError, ValueError):
    """
    Raised when statistics or resampling are asked to work on an empty input.
    """


class InvalidDistributionError(SMCKitError, ValueError):
    """
    Raised when a set of weights does not define a probability distribution,
    e.g. it is empty, contains negative or non-finite entries, or sums to zero.
    """


class UnsupportedOperationError(SMCKitError, NotImplementedError):
    """
    Raised when a distribution is asked for an operation it cannot perform,
    such as sampling from an unnormalized target density.
    """
