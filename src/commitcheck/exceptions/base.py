from __future__ import annotations


class CommitCheckError(Exception):
    """Base exception class for all commitcheck-specific errors.

    This is the root of the commitcheck exception hierarchy. Catching it at
    the CLI boundary handles every project error while letting system
    exceptions propagate naturally.

    Attributes:
        message: Human-readable error message describing what went wrong.

    Example:
        ```python
        try:
            result = await pipeline.run()
        except CommitCheckError as e:
            logger.error("commitcheck_error", message=e.message)
            sys.exit(1)
        ```
    """

    def __init__(self, message: str) -> None:
        """Initialize the CommitCheckError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
