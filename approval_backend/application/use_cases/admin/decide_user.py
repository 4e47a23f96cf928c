# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserStatus
from ....domain.exceptions import InvalidUserStateError, UserNotFoundError
from ....utils.datetime_utils import utc_now
from ....utils.email_service import (
    APPROVAL_TEMPLATE,
    REJECTION_TEMPLATE,
    EmailNotificationService,
)
from ...dto.admin_dto import DecisionResult

logger = logging.getLogger(__name__)

DECISION_TEMPLATES = {
    UserStatus.APPROVED: APPROVAL_TEMPLATE,
    UserStatus.REJECTED: REJECTION_TEMPLATE,
}


class DecideUserUseCase:
    """
    Use case for an admin approving or rejecting a pending account.

    The status change is persisted first; the notification email is sent
    afterwards and its failure only shows up as ``email_sent=False``.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        email_service: EmailNotificationService,
    ) -> None:
        self.user_repository = user_repository
        self.email_service = email_service

    async def execute(self, user_id: str, outcome: str, admin_id: str) -> DecisionResult:
        """
        Move a pending user to `outcome` and notify them

        Args:
            user_id: ID of the user being decided
            outcome: UserStatus.APPROVED or UserStatus.REJECTED
            admin_id: ID of the deciding admin

        Returns:
            DecisionResult with the updated user and whether the email went out

        Raises:
            UserNotFoundError: If no user has this ID
            InvalidUserStateError: If the user is no longer pending
            UserStoreError: If the store fails
        """
        if outcome not in DECISION_TEMPLATES:
            raise ValueError(f"Invalid decision outcome: {outcome}")

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        if not user.is_pending:
            raise InvalidUserStateError(user.status)

        updated = await self.user_repository.apply_decision(
            user_id=user_id,
            status=outcome,
            decided_by=admin_id,
            decided_at=utc_now(),
        )
        if updated is None:
            # Lost a race with a concurrent decision (or the record vanished)
            current = await self.user_repository.find_by_id(user_id)
            if current is None:
                raise UserNotFoundError(user_id)
            raise InvalidUserStateError(current.status)

        logger.info("User %s %s by admin %s", updated.id, updated.status, admin_id)

        email_sent = await self.email_service.notify(DECISION_TEMPLATES[outcome], updated)
        if not email_sent:
            logger.warning("Decision email for user %s was not sent", updated.id)

        return DecisionResult(
            id=updated.id or "",
            name=updated.name,
            email=updated.email,
            status=updated.status,
            approved_at=updated.approved_at,
            email_sent=email_sent,
        )

    async def approve(self, user_id: str, admin_id: str) -> DecisionResult:
        return await self.execute(user_id, UserStatus.APPROVED, admin_id)

    async def reject(self, user_id: str, admin_id: str) -> DecisionResult:
        return await self.execute(user_id, UserStatus.REJECTED, admin_id)
