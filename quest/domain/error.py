"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class ConflictError(DomainError):
    """Base for unique-key conflicts on fact rows."""

    pass


class AlreadyExistsError(ConflictError):
    """Raised when a (user, game) scoped row already exists."""

    def __init__(self, message: str):
        super().__init__(message)


class DuplicateVoteError(ConflictError):
    """Raised when a user already holds a vote on the same item."""

    def __init__(self, message: str = "You already voted on this achievement's difficulty"):
        super().__init__(message)


class DuplicateUnlockError(ConflictError):
    """Raised when a user unlocks the same achievement twice."""

    def __init__(self, message: str = "Achievement already unlocked"):
        super().__init__(message)


class SelfFollowError(DomainError):
    """Raised when a user tries to follow themselves."""

    def __init__(self) -> None:
        super().__init__("Cannot follow yourself")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to edit content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"You are not allowed to modify this {resource}")


class StorageUnavailableError(DomainError):
    """Raised when the backing store cannot be reached."""

    def __init__(self, message: str = "Storage is temporarily unavailable"):
        super().__init__(message)
