"""
Resume comparison domain exceptions.
"""


class ComparisonError(Exception):
    """Base exception for resume comparison errors."""

    pass


class DragPayloadError(ComparisonError):
    """Raised when a drop cannot be resolved to a dragged item."""

    def __init__(self, detail: str = None):
        self.detail = detail
        message = "Failed to get drag data. Please try again."
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class ComparisonNotLoadedError(ComparisonError):
    """Raised when an operation needs both sides loaded first."""

    def __init__(self):
        super().__init__("Both resumes must be loaded before comparing")


class ComparisonRefreshError(ComparisonError):
    """Raised when a batch copy ran but re-fetching the sides failed.

    ``outcomes`` holds the per-item results of the copy that did run.
    """

    def __init__(self, outcomes: list, cause: Exception):
        self.outcomes = outcomes
        self.cause = cause
        super().__init__(
            f"Copied {len(outcomes)} item(s) but failed to refresh the comparison: "
            f"{str(cause) or type(cause).__name__}"
        )
