"""
Exception types raised by the chart gallery.
"""


class ChartGalleryError(Exception):
    """Base class for chart gallery errors."""


class UnknownVariantError(ChartGalleryError, KeyError):
    """Raised when a chart identifier is outside the closed variant set."""

    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(f"Unknown chart variant: {identifier!r}")

    def __str__(self) -> str:
        return self.args[0]


class UnimplementedDescriptorError(ChartGalleryError, NotImplementedError):
    """Raised when a chart example does not provide its own accessibility descriptor."""

    def __init__(self, variant):
        self.variant = variant
        super().__init__(f"Accessibility descriptor not implemented for chart variant: {variant}")


class RegistryError(ChartGalleryError):
    """Raised when the chart registry does not cover the variant set correctly."""
