"""Domain-specific exceptions for pose comparison."""


class PoseComparisonError(Exception):
    """Base exception for pose comparison failures."""


class InvalidPoseError(PoseComparisonError, ValueError):
    """Raised when a pose argument is empty or holds malformed landmarks."""


class InvalidConfigError(PoseComparisonError, ValueError):
    """Raised when a configuration value falls outside its accepted range."""


class NoVisibleLandmarksError(PoseComparisonError):
    """Raised when no landmark of a pose passes the visibility filter."""


class NoCommonLandmarksError(PoseComparisonError):
    """Raised when two poses share no mutually visible features."""
