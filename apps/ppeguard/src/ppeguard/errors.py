"""Exception types raised by ppeguard.

Only malformed inputs are errors. Unknown labels, low-confidence
detections and scenes without a person are normal outcomes and show up
in the ComplianceReport instead.
"""


class PPEGuardError(Exception):
    """Base class for all ppeguard errors."""


class MalformedDetection(PPEGuardError, ValueError):
    """Raised when a detection is missing its label or confidence,
    or carries a confidence outside [0, 1].

    Attributes:
        index: Position of the offending detection in the input, if known.
        reason: Short description of what is wrong.
    """

    def __init__(self, reason: str, index: int | None = None):
        self.reason = reason
        self.index = index
        where = f"detection #{index}" if index is not None else "detection"
        super().__init__(f"Malformed {where}: {reason}")


class InvalidProfile(PPEGuardError):
    """Raised when a policy profile cannot be resolved or is badly configured."""


class ConfigError(PPEGuardError):
    """Raised for invalid configuration files or values."""


class ImageNotFound(PPEGuardError, FileNotFoundError):
    """Raised when the image to analyze does not exist."""


class ImageProbeError(PPEGuardError):
    """Raised when an image file exists but cannot be read."""


__all__ = [
    "PPEGuardError",
    "MalformedDetection",
    "InvalidProfile",
    "ConfigError",
    "ImageNotFound",
    "ImageProbeError",
]
