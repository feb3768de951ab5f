"""Signed-in user model carrying per-organization permissions."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class SignedInUser(BaseModel):
    """User as handed over by the authentication layer."""

    user_id: int = Field(..., description="Numeric user id")
    login: str = Field(..., description="User's login name")
    org_id: int = Field(1, description="Currently active organization")
    permissions: Dict[int, Dict[str, List[str]]] = Field(
        default_factory=dict,
        description="Organization id -> action -> granted scopes",
    )

    @field_validator("org_id")
    @classmethod
    def validate_org_id(cls, v):
        if v < 1:
            raise ValueError("org_id must be positive")
        return v

    def permissions_for_org(self, org_id: Optional[int] = None) -> Dict[str, List[str]]:
        """Get the permission set for an organization, default the active one."""
        return self.permissions.get(self.org_id if org_id is None else org_id, {})
