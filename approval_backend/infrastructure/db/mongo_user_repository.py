# Standard library imports
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields, UserRole, UserStatus
from ...domain.exceptions import DuplicateEmailError, UserStoreError
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


def _to_object_id(user_id: Optional[str]) -> Optional[ObjectId]:
    if not user_id:
        return None
    try:
        return ObjectId(user_id)
    except (InvalidId, ValueError, TypeError):
        return None


def _build_filter(status: Optional[str], role: Optional[str]) -> Dict[str, Any]:
    query: Dict[str, Any] = {}
    if status is not None:
        query[UserFields.STATUS] = status
    if role is not None:
        query[UserFields.ROLE] = role
    return query


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for (matched lower-cased)

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email.strip().lower()})
        except PyMongoError as e:
            raise UserStoreError(f"Error finding user by email: {str(e)}")
        return self._document_to_user(document) if document else None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise (including malformed IDs)
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise UserStoreError(f"Error finding user by ID: {str(e)}")
        return self._document_to_user(document) if document else None

    async def find_by_ids(self, user_ids: List[str]) -> List[User]:
        object_ids = [oid for oid in (_to_object_id(uid) for uid in user_ids) if oid is not None]
        if not object_ids:
            return []

        try:
            cursor = self.user_collection.find({UserFields.MONGO_ID: {"$in": object_ids}})
            return [self._document_to_user(document) async for document in cursor]
        except PyMongoError as e:
            raise UserStoreError(f"Error finding users by ID: {str(e)}")

    async def find_first_admin(self) -> Optional[User]:
        try:
            document = await self.user_collection.find_one({UserFields.ROLE: UserRole.ADMIN})
        except PyMongoError as e:
            raise UserStoreError(f"Error finding admin user: {str(e)}")
        return self._document_to_user(document) if document else None

    async def list_users(
        self,
        status: Optional[str] = None,
        role: Optional[str] = None,
    ) -> List[User]:
        """
        List users matching status/role, sorted newest first by creation time

        Args:
            status: Optional status filter
            role: Optional role filter

        Returns:
            List of User domain models
        """
        try:
            cursor = self.user_collection.find(_build_filter(status, role)).sort(
                UserFields.CREATED_AT, DESCENDING
            )
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except PyMongoError as e:
            raise UserStoreError(f"Error listing users: {str(e)}")

    async def count_users(
        self,
        status: Optional[str] = None,
        role: Optional[str] = None,
    ) -> int:
        try:
            return await self.user_collection.count_documents(_build_filter(status, role))
        except PyMongoError as e:
            raise UserStoreError(f"Error counting users: {str(e)}")

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set

        Raises:
            DuplicateEmailError: If another user already owns the email
            UserStoreError: If the write fails
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)

        try:
            if user.id:
                object_id = _to_object_id(user.id)
                if object_id is None:
                    raise ValueError(f"Invalid user ID format: {user.id}")

                updated_document = await self.user_collection.find_one_and_update(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": {k: v for k, v in user_dict.items() if k != UserFields.MONGO_ID}},
                    return_document=ReturnDocument.AFTER,
                )
                if updated_document is None:
                    raise ValueError(f"User with ID {user.id} not found")
                return self._document_to_user(updated_document)

            # Create new user
            user_dict.pop(UserFields.MONGO_ID, None)
            user_dict.setdefault(UserFields.CREATED_AT, utc_now())
            result = await self.user_collection.insert_one(user_dict)

            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
            if new_document is None:
                raise UserStoreError("User was created but could not be retrieved")
            return self._document_to_user(new_document)
        except DuplicateKeyError:
            raise DuplicateEmailError(user.email)
        except PyMongoError as e:
            raise UserStoreError(f"Error saving user: {str(e)}")

    async def apply_decision(
        self,
        user_id: str,
        status: str,
        decided_by: str,
        decided_at: datetime,
    ) -> Optional[User]:
        """
        Conditionally move a pending user to a terminal status

        The status check is part of the update filter, so two concurrent
        decisions on the same user cannot both succeed.

        Returns:
            Updated User, or None if no pending user matched
        """
        if status not in UserStatus.TERMINAL:
            raise ValueError(f"Invalid decision status: {status}")

        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id, UserFields.STATUS: UserStatus.PENDING},
                {
                    "$set": {
                        UserFields.STATUS: status,
                        UserFields.APPROVED_BY: decided_by,
                        UserFields.APPROVED_AT: decided_at,
                    }
                },
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise UserStoreError(f"Error applying decision to user: {str(e)}")
        return self._document_to_user(document) if document else None

    async def delete_all(self) -> int:
        try:
            result = await self.user_collection.delete_many({})
        except PyMongoError as e:
            raise UserStoreError(f"Error deleting users: {str(e)}")
        logger.warning("Deleted %d user record(s)", result.deleted_count)
        return result.deleted_count

    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        approved_by = document.get(UserFields.APPROVED_BY)
        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            role=document.get(UserFields.ROLE, UserRole.USER),
            status=document.get(UserFields.STATUS, UserStatus.PENDING),
            approved_by=str(approved_by) if approved_by is not None else None,
            approved_at=ensure_utc(document.get(UserFields.APPROVED_AT)),
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
        )

    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """
        Convert User domain model to MongoDB document

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        user_dict: Dict[str, Any] = {
            UserFields.NAME: user.name.strip(),
            UserFields.EMAIL: user.email.strip().lower(),
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.ROLE: user.role,
            UserFields.STATUS: user.status,
            UserFields.APPROVED_BY: user.approved_by,
            UserFields.APPROVED_AT: user.approved_at,
        }
        if user.created_at is not None:
            user_dict[UserFields.CREATED_AT] = user.created_at

        object_id = _to_object_id(user.id)
        if object_id is not None:
            user_dict[UserFields.MONGO_ID] = object_id

        return user_dict
