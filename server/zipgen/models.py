import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


class UserInfo(BaseModel):
    username: str
    email: str
    project_name: str
    project_description: str


class RenderContext(BaseModel):
    """
    Per-request values used to fill template placeholders.

    Built once from the submitted UserInfo plus a generated id and a UTC
    timestamp. Frozen after creation.
    """
    model_config = ConfigDict(frozen=True)

    username: str
    email: str
    project_name: str
    project_description: str
    generated_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)
    )

    @classmethod
    def from_user_info(cls, user_info: UserInfo) -> "RenderContext":
        return cls(**user_info.model_dump())
