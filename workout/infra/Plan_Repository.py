"""Read-only access to the plan store (plans, client assignments, exercise catalog)."""
import logging
from pathlib import Path
from typing import Optional

from workout.domain.TrainingPlan import ClientPlanAssignment, TrainingPlan
from workout.infra.json_store import load_json
from workout.infra.paths import PLANS_FILE

logger = logging.getLogger(__name__)


class PlanRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else PLANS_FILE

    def _load(self) -> dict:
        store = load_json(self.path, {})
        if not isinstance(store, dict):
            logger.warning("Plan store %s is not an object; treating as empty", self.path)
            return {}
        return store

    def get_training_plan(self, plan_id: str) -> Optional[TrainingPlan]:
        for raw in self._load().get("plans", []):
            if str(raw.get("id")) == str(plan_id):
                return TrainingPlan.from_dict(raw)
        return None

    def get_client_plans(self, client_id: str) -> list[ClientPlanAssignment]:
        return [ClientPlanAssignment.from_dict(a) for a in self._load().get("assignments", [])
                if str(a.get("clientId")) == str(client_id)]

    def get_active_client_plan(self, client_id: str) -> Optional[ClientPlanAssignment]:
        """Return the client's active assignment; the plan store guarantees at most one."""
        return next((a for a in self.get_client_plans(client_id) if a.is_active), None)

    def get_exercise(self, exercise_id: str) -> Optional[dict]:
        for ex in self._load().get("exercises", []):
            if str(ex.get("id")) == str(exercise_id):
                return ex
        return None
