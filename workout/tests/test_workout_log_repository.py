import tempfile
import unittest
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta
from pathlib import Path

from workout.domain.errors import StorageFailure, ValidationError
from workout.infra.WorkoutLog_Repository import WorkoutLogRepository
from workout.tests.fixtures import MONDAY


class TestWorkoutLogRepository(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "workout_logs.json"
        self.repo = WorkoutLogRepository(self.path)

    def tearDown(self):
        self._tmp.cleanup()

    def test_complete_set_is_idempotent(self):
        first, created1 = self.repo.complete_set("client-1", "pe-squat", 1, MONDAY, actual_reps=5)
        second, created2 = self.repo.complete_set("client-1", "pe-squat", 1, MONDAY, actual_reps=8)
        self.assertTrue(created1)
        self.assertFalse(created2)
        self.assertEqual(second.id, first.id)
        # The existing completion is not overwritten
        self.assertEqual(second.actual_reps, 5)
        self.assertEqual(len(self.repo.list_for_date("client-1", MONDAY)), 1)

    def test_uncheck_then_complete_restores_completion(self):
        original, _ = self.repo.complete_set("client-1", "pe-squat", 2, MONDAY)
        self.assertTrue(self.repo.uncheck_set("client-1", "pe-squat", 2, MONDAY))
        self.assertEqual(self.repo.list_for_date("client-1", MONDAY), [])
        again, created = self.repo.complete_set("client-1", "pe-squat", 2, MONDAY)
        self.assertTrue(created)
        self.assertNotEqual(again.id, original.id)
        self.assertEqual(again.key, original.key)

    def test_uncheck_absent_set_is_noop(self):
        self.assertFalse(self.repo.uncheck_set("client-1", "pe-squat", 1, MONDAY))
        self.assertFalse(self.path.exists())

    def test_complete_all_sets_twice_gives_exactly_n_entries(self):
        created = self.repo.complete_exercise_all_sets("client-1", "pe-row", 4, MONDAY, actual_weight=50)
        self.assertEqual([e.set_number for e in created], [1, 2, 3, 4])
        self.assertEqual(self.repo.complete_exercise_all_sets("client-1", "pe-row", 4, MONDAY), [])
        self.assertEqual(len(self.repo.list_for_date("client-1", MONDAY, "pe-row")), 4)

    def test_complete_all_sets_fills_only_missing_sets(self):
        self.repo.complete_set("client-1", "pe-row", 2, MONDAY, actual_reps=12)
        created = self.repo.complete_exercise_all_sets("client-1", "pe-row", 4, MONDAY, actual_reps=10)
        self.assertEqual([e.set_number for e in created], [1, 3, 4])
        by_set = {e.set_number: e for e in self.repo.list_for_date("client-1", MONDAY)}
        self.assertEqual(by_set[2].actual_reps, 12)
        self.assertEqual(by_set[3].actual_reps, 10)

    def test_invalid_set_numbers_are_rejected(self):
        for bad in (0, -1, 1.5, True, float("inf"), None, "1"):
            with self.assertRaises(ValidationError, msg=repr(bad)):
                self.repo.complete_set("client-1", "pe-squat", bad, MONDAY)
        with self.assertRaises(ValidationError):
            self.repo.uncheck_set("client-1", "pe-squat", 0, MONDAY)
        for bad in (0, -3, 101, 2.0):
            with self.assertRaises(ValidationError, msg=repr(bad)):
                self.repo.complete_exercise_all_sets("client-1", "pe-squat", bad, MONDAY)

    def test_clients_and_dates_are_independent(self):
        self.repo.complete_set("client-1", "pe-squat", 1, MONDAY)
        _, created_other_client = self.repo.complete_set("client-2", "pe-squat", 1, MONDAY)
        _, created_other_day = self.repo.complete_set("client-1", "pe-squat", 1, MONDAY + timedelta(days=7))
        self.assertTrue(created_other_client)
        self.assertTrue(created_other_day)
        self.assertEqual(len(self.repo.list_for_client("client-1")), 2)
        self.assertEqual(len(self.repo.list_for_client("client-2")), 1)

    def test_ids_containing_separators_do_not_collide(self):
        self.repo.complete_set("auth0", "123|pe-squat", 1, MONDAY)
        entry, created = self.repo.complete_set("auth0|123", "pe-squat", 1, MONDAY)
        self.assertTrue(created)
        self.assertEqual(entry.client_id, "auth0|123")
        self.assertEqual(len(self.repo.list_for_client("auth0|123")), 1)
        self.assertTrue(self.repo.uncheck_set("auth0", "123|pe-squat", 1, MONDAY))
        self.assertEqual(len(self.repo.list_for_client("auth0|123")), 1)

    def test_queries(self):
        self.repo.complete_set("client-1", "pe-squat", 1, MONDAY)
        self.repo.complete_set("client-1", "pe-squat", 1, MONDAY + timedelta(days=7))
        self.repo.complete_set("client-1", "pe-bench", 1, MONDAY + timedelta(days=2))
        history = self.repo.list_for_exercise("client-1", "pe-squat")
        self.assertEqual([e.date for e in history], [MONDAY + timedelta(days=7), MONDAY])
        in_week = self.repo.list_for_range("client-1", MONDAY, MONDAY + timedelta(days=6))
        self.assertEqual([e.plan_exercise_id for e in in_week], ["pe-squat", "pe-bench"])

    def test_entries_survive_a_new_repository_instance(self):
        self.repo.complete_set("client-1", "pe-squat", 3, MONDAY, actual_weight=82.5, notes="felt easy")
        reloaded = WorkoutLogRepository(self.path).list_for_date("client-1", MONDAY)
        self.assertEqual(len(reloaded), 1)
        self.assertEqual(reloaded[0].actual_weight, 82.5)
        self.assertEqual(reloaded[0].notes, "felt easy")
        self.assertEqual(reloaded[0].date, MONDAY)

    def test_concurrent_duplicate_completions_produce_one_entry(self):
        def complete(_):
            return WorkoutLogRepository(self.path).complete_set("client-1", "pe-squat", 1, MONDAY)[1]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(complete, range(24)))
        self.assertEqual(results.count(True), 1)
        self.assertEqual(len(self.repo.list_for_date("client-1", MONDAY)), 1)

    def test_concurrent_complete_and_uncheck_leave_a_consistent_state(self):
        def toggle(i):
            if i % 2:
                self.repo.complete_set("client-1", "pe-squat", 1, MONDAY)
            else:
                self.repo.uncheck_set("client-1", "pe-squat", 1, MONDAY)

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(toggle, range(40)))
        self.assertIn(len(self.repo.list_for_date("client-1", MONDAY)), (0, 1))

    def test_corrupt_store_raises_storage_failure(self):
        self.path.write_text("{not json", encoding="utf-8")
        with self.assertRaises(StorageFailure):
            self.repo.complete_set("client-1", "pe-squat", 1, MONDAY)


if __name__ == '__main__':
    unittest.main()
