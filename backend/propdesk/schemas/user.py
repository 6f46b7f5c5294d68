"""User schemas."""

from typing import Optional

from propdesk.schemas.base import IDMixin, RecordSchema
from propdesk.models.enums import UserRole


class User(RecordSchema, IDMixin):
    """Staff or portal user. Only used to resolve property managers."""

    name: str
    email: str
    phone: Optional[str] = None
    role: UserRole
    is_active: bool = True
