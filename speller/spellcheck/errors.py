class ModelFormatError(ValueError):
    """Raised when a spelling model cannot be read or written."""


class ModelNotFoundError(ModelFormatError):
    """Raised when a model name resolves to neither a file nor a bundled resource."""
