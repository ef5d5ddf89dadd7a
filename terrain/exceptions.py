"""Domain errors raised by the Terrain engine and reference-data loader."""


class IndicationNotFoundError(ValueError):
    """Raised when an indication string cannot be resolved to a reference record."""

    def __init__(self, indication: str):
        self.indication = indication
        super().__init__(
            f"Indication not found: {indication}. "
            "Please contact support to add this indication."
        )


class ReferenceDataError(RuntimeError):
    """Raised at startup when the static reference dataset is inconsistent."""
