from deepread.exceptions import DeepReadError


class WorkflowError(DeepReadError):
    """Base exception for workflow errors."""


class InvalidTransitionError(WorkflowError):
    """Raised when an operation is not permitted in the current workflow state."""
