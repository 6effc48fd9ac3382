class ClawionError(Exception):
    """Base exception for clawion domain errors."""

    pass


class NotFoundError(ClawionError):
    """Raised when a mission, agent, task or document cannot be found."""

    pass


class ValidationFailure(ClawionError):
    """Raised when a document on disk does not match its schema."""

    def __init__(self, path, issues: list[str]):
        self.path = str(path)
        self.issues = issues
        detail = "\n".join(f"  - {issue}" for issue in issues)
        super().__init__(f"Validation failed for {self.path}:\n{detail}")


class PermissionDenied(ClawionError):
    """Raised when the acting agent lacks the role an action requires."""

    pass
