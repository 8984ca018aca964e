"""Exception and warning types raised by the K-Space engine."""


class SpaceConfigurationError(ValueError):
    """Raised when a Space cannot be built with the requested configuration."""


class InvalidOperationError(RuntimeError):
    """Raised when points, clusters and spaces are combined illegally.

    Examples: attaching a cluster to another cluster, or measuring the
    distance between points that belong to different spaces.
    """


class ConvergenceWarning(UserWarning):
    """Emitted when solving stops at ``max_iter`` before assignments settle."""
