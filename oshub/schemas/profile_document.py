"""Profile document schema (``profiles/{profileId}``)."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProfileDocument(BaseModel):
    """Snapshot of a document in the ``profiles`` collection.

    Profiles do not carry contact fields; ``user_id`` points at the
    ``uid`` of the owning user document.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    user_id: Optional[str] = Field(None, alias="userId")
    is_project_maintainer: Optional[bool] = Field(None, alias="isProjectMaintainer")
    join_newsletter: Optional[bool] = Field(None, alias="joinNewsletter")
