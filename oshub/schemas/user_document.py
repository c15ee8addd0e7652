"""User document schema (``users/{userId}``)."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserDocument(BaseModel):
    """Snapshot of a document in the ``users`` collection.

    Written by the web app; every field is optional here because the
    functions must tolerate partial documents. Unknown fields are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    uid: Optional[str] = None
    github_login: Optional[str] = Field(None, alias="githubLogin")
    email: Optional[str] = None
    is_project_maintainer: Optional[bool] = Field(None, alias="isProjectMaintainer")

    def traits(self) -> Dict[str, Any]:
        """Identify traits for this user, camelCase, omitting absent fields."""
        return self.model_dump(
            by_alias=True,
            exclude_none=True,
            include={"github_login", "email", "is_project_maintainer"},
        )
