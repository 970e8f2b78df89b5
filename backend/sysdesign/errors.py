class PayloadError(ValueError):
    """Structured payload from the generative service failed validation."""


class ServiceCallError(RuntimeError):
    """The generative service could not be reached or answered garbage."""


class SnapshotError(ValueError):
    """A JSON diagram snapshot could not be imported."""
