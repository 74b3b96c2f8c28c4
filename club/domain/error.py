"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Local validation failed before anything was sent."""

    pass


class NotAuthenticatedError(DomainError):
    """Raised when an action needs a logged-in session."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Login required to {action}")


class NotAuthorizedError(DomainError):
    """Raised when the session user lacks the role an action needs."""

    def __init__(self, action: str, role: str):
        super().__init__(f"Role {role} required to {action}")


class InvalidTransitionError(DomainError):
    """Raised when a post status change leaves the workflow graph."""

    def __init__(self, post_id: str, current: str, target: str):
        self.post_id = post_id
        self.current = current
        self.target = target
        super().__init__(f"Post {post_id} cannot move from {current} to {target}")


class ContractError(DomainError):
    """Raised when a server payload does not match the expected shape."""

    def __init__(self, source: str, detail: str):
        self.source = source
        super().__init__(f"Unexpected payload from {source}: {detail}")
