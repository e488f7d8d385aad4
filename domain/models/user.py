"""
User model with coach/athlete linkage.

An athlete points at its coach through ``coach_id``; a coach lists its
athletes in ``athletes``. Pending invitations live in ``coach_requests`` and
are distinct from the active link.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from domain.models.base import CamelModel, new_id


class UserRole(str, Enum):
    """Account roles."""

    ATHLETE = "athlete"
    COACH = "coach"
    ADMIN = "admin"


class CoachRequest(CamelModel):
    """A pending invitation from a coach to an athlete."""

    coach_id: str
    coach_name: str = ""


class User(CamelModel):
    """An application user."""

    id: str = Field(default_factory=new_id)
    email: str
    name: str = ""
    role: UserRole = UserRole.ATHLETE
    coach_id: Optional[str] = None
    athletes: List[str] = Field(default_factory=list)
    coach_requests: List[CoachRequest] = Field(default_factory=list)
    profile_picture: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def is_coach(self) -> bool:
        return self.role == UserRole.COACH

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def has_request_from(self, coach_id: str) -> bool:
        """Check whether a pending invitation from ``coach_id`` exists."""
        return any(r.coach_id == coach_id for r in self.coach_requests)

    def coaches_athlete(self, athlete_id: str) -> bool:
        return athlete_id in self.athletes
