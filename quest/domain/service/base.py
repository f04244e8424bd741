"""Base service class for domain services."""

import logfire

from quest.domain.error import NotAuthorizedError
from quest.domain.value import Actor, UserId


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


def ensure_can_modify(
    actor: Actor, owner_id: UserId, resource: str, resource_id: object
) -> None:
    """Raise NotAuthorizedError unless the actor owns the row or is an admin."""
    if not actor.can_modify(owner_id):
        logfire.warn(
            "Modification rejected",
            resource=resource,
            resource_id=str(resource_id),
            user_id=str(actor.user_id),
        )
        raise NotAuthorizedError(resource, str(resource_id), str(actor.user_id))
