"""
Coach-athlete link state machine.

Per (athlete, coach) pair an athlete is:
- unlinked: no coach_id pointing at the coach and no pending request from it
- invited: a pending request from the coach sits in ``coach_requests``
- linked: ``coach_id`` equals the coach's id

An athlete has at most one active coach. Accepting any invitation clears every
pending request. All functions mutate the given models in place; persisting
them is the caller's job.
"""

import logging
from typing import Optional

from application.exceptions import NotFoundError, ValidationError
from domain.models import CoachRequest, User

logger = logging.getLogger(__name__)


def _drop_from_previous_coach(athlete: User, coach: User, previous_coach: Optional[User]) -> None:
    if previous_coach is not None and previous_coach.id != coach.id:
        previous_coach.athletes = [a for a in previous_coach.athletes if a != athlete.id]
        logger.info(f"Coach {previous_coach.id} lost athlete {athlete.id} to coach {coach.id}")


def send_invite(coach: User, athlete: User) -> User:
    """
    Add a pending invitation from ``coach`` to ``athlete``.

    Raises:
        ValidationError: If the coach invites themselves or already invited the athlete
    """
    if athlete.id == coach.id:
        raise ValidationError("Cannot add yourself as athlete")
    if athlete.has_request_from(coach.id):
        raise ValidationError("Invitation already sent")

    athlete.coach_requests.append(CoachRequest(coach_id=coach.id, coach_name=coach.name))
    logger.info(f"Coach {coach.id} invited athlete {athlete.id}")
    return athlete


def accept_invite(athlete: User, coach: User, previous_coach: Optional[User] = None) -> None:
    """
    Link ``athlete`` to ``coach`` and clear all pending invitations.

    The coach's athlete list gains the athlete only if it is not already there.
    The previous coach (if any, and different) loses the athlete from its list.

    Raises:
        NotFoundError: If the athlete holds no invitation from the coach
    """
    if not athlete.has_request_from(coach.id):
        raise NotFoundError("Invitation not found")

    _drop_from_previous_coach(athlete, coach, previous_coach)
    athlete.coach_id = coach.id
    athlete.coach_requests = []
    if not coach.coaches_athlete(athlete.id):
        coach.athletes.append(athlete.id)
    logger.info(f"Athlete {athlete.id} accepted coach {coach.id}")


def reject_invite(athlete: User, coach_id: str) -> User:
    """Remove only the invitation from ``coach_id``; absent invitations are ignored."""
    athlete.coach_requests = [r for r in athlete.coach_requests if r.coach_id != coach_id]
    return athlete


def unlink(coach: User, athlete_id: str, athlete: Optional[User]) -> None:
    """
    Remove ``athlete_id`` from the coach's list and clear the athlete's link.

    The athlete's ``coach_id`` is cleared only when it points at this coach.
    ``athlete`` may be None when the athlete record no longer exists.
    """
    coach.athletes = [a for a in coach.athletes if a != athlete_id]
    if athlete is not None and athlete.coach_id == coach.id:
        athlete.coach_id = None
    logger.info(f"Coach {coach.id} unlinked athlete {athlete_id}")


def assign_directly(coach: User, athlete: User, previous_coach: Optional[User]) -> None:
    """
    Link ``athlete`` to ``coach`` without an invitation (admin path).

    Pending invitations are cleared, and the previous coach (if any, and
    different) loses the athlete from its list.

    Raises:
        ValidationError: If ``coach`` is not a coach or is the athlete
    """
    if not coach.is_coach:
        raise ValidationError("Target user is not a coach")
    if coach.id == athlete.id:
        raise ValidationError("Cannot add yourself as athlete")

    _drop_from_previous_coach(athlete, coach, previous_coach)

    athlete.coach_id = coach.id
    athlete.coach_requests = []
    if not coach.coaches_athlete(athlete.id):
        coach.athletes.append(athlete.id)
    logger.info(f"Athlete {athlete.id} assigned to coach {coach.id}")
