"""Exception types raised by uvoxid"""

__all__ = ['FrameMismatchError', 'PrecisionOutOfRangeError', 'UvoxError']


class UvoxError(ValueError):
    """Base class for all uvoxid-specific exceptions."""


class PrecisionOutOfRangeError(UvoxError):
    """Raised when a requested tolerance precision cannot be represented."""

    def __init__(self, significant_units: int, max_units: int):
        self.significant_units = significant_units
        self.max_units = max_units
        super().__init__(
            f'significant_units must be between 0 and {max_units}, '
            f'got {significant_units}'
        )


class FrameMismatchError(UvoxError):
    """Raised when two addresses measured from different frames are combined."""

    def __init__(self, frame_a: int, frame_b: int):
        self.frame_a = frame_a
        self.frame_b = frame_b
        super().__init__(
            f'addresses belong to different reference frames ({frame_a} != {frame_b})'
        )
