from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class UserRead(BaseModel):
    id: UUID
    email: str
    display_name: str
    role: str
    enabled: bool
    created_at: datetime

    model_config = {"from_attributes": True}
