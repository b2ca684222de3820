"""FastAPI dependencies: stores, caller identity and the caller's active plan.

Authentication happens upstream; the gateway forwards the resolved identity as
X-User-Id / X-User-Role headers. Tests replace any of these through
app.dependency_overrides.
"""
from datetime import date
from typing import Optional

from fastapi import Depends, Header

from workout.domain.Caller import Caller, Role
from workout.domain.TrainingPlan import ClientPlanAssignment, TrainingPlan
from workout.domain.errors import Forbidden, NotAuthorized
from workout.infra.Notes_Repository import NotesRepository
from workout.infra.Plan_Repository import PlanRepository
from workout.infra.WorkoutLog_Repository import WorkoutLogRepository


def get_plan_repository() -> PlanRepository:
    return PlanRepository()


def get_log_repository() -> WorkoutLogRepository:
    return WorkoutLogRepository()


def get_notes_repository() -> NotesRepository:
    return NotesRepository()


def get_today() -> date:
    return date.today()


def get_caller(x_user_id: Optional[str] = Header(default=None),
               x_user_role: Optional[str] = Header(default=None)) -> Caller:
    if not x_user_id or not x_user_id.strip():
        raise NotAuthorized("Authentication required")
    try:
        role = Role((x_user_role or "").strip().lower())
    except ValueError:
        raise Forbidden(f"Unknown role: {x_user_role!r}")
    return Caller(x_user_id.strip(), role)


def require_client(caller: Caller = Depends(get_caller)) -> Caller:
    if not caller.is_client:
        raise Forbidden("Only clients can access workout data")
    return caller


class ActivePlan:
    """The caller's active assignment and its plan; either may be None."""

    def __init__(self, client_id: str, assignment: Optional[ClientPlanAssignment],
                 plan: Optional[TrainingPlan]):
        self.client_id = client_id
        self.assignment = assignment
        self.plan = plan


def get_active_plan(caller: Caller = Depends(require_client),
                    plans: PlanRepository = Depends(get_plan_repository)) -> ActivePlan:
    assignment = plans.get_active_client_plan(caller.user_id)
    plan = plans.get_training_plan(assignment.plan_id) if assignment else None
    return ActivePlan(caller.user_id, assignment, plan)
