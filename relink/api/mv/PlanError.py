"""Move plan validation errors.

All of them are raised while validating a plan, before anything on disk changes.
"""


class PlanError(Exception):
    """Raised when a move plan is invalid."""

    title = "Invalid move plan"

    def __init__(self, errors: list[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        message = f"{self.title}:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)


class InvalidMovePath(PlanError):
    title = "Invalid move path"


class MissingSource(PlanError):
    title = "Move source does not exist"


class OverlappingMove(PlanError):
    title = "Overlapping moves"


class PlanCollision(PlanError):
    title = "Move destinations collide"


class DanglingMove(PlanError):
    title = "Move destination already exists"
