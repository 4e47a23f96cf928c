"""Constants for User model field names and enumerated values"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    HASHED_PASSWORD = "password"
    ROLE = "role"
    STATUS = "status"
    APPROVED_BY = "approvedBy"
    APPROVED_AT = "approvedAt"
    CREATED_AT = "createdAt"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class UserRole:
    """Account roles"""
    USER = "user"
    ADMIN = "admin"

    ALL = (USER, ADMIN)


class UserStatus:
    """Account approval statuses. Only PENDING may transition."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    ALL = (PENDING, APPROVED, REJECTED)
    TERMINAL = (APPROVED, REJECTED)
