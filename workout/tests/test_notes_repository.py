import tempfile
import unittest
from datetime import timedelta
from pathlib import Path

from workout.infra.Notes_Repository import NotesRepository
from workout.tests.fixtures import MONDAY


class TestNotesRepository(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.repo = NotesRepository(Path(self._tmp.name) / "exercise_notes.json")

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_notes_return_none(self):
        self.assertIsNone(self.repo.get_notes("client-1", "pe-squat", MONDAY))

    def test_save_overwrites_previous_notes(self):
        self.repo.save_notes("client-1", "pe-squat", MONDAY, "knees caving")
        self.repo.save_notes("client-1", "pe-squat", MONDAY, "better depth today")
        note = self.repo.get_notes("client-1", "pe-squat", MONDAY)
        self.assertEqual(note.notes, "better depth today")
        self.assertEqual(len(self.repo.list_for_date("client-1", MONDAY)), 1)

    def test_notes_are_keyed_by_exercise_and_date(self):
        self.repo.save_notes("client-1", "pe-squat", MONDAY, "week 1")
        self.repo.save_notes("client-1", "pe-squat", MONDAY + timedelta(days=7), "week 2")
        self.repo.save_notes("client-1", "pe-bench", MONDAY, "bench")
        self.assertEqual(self.repo.get_notes("client-1", "pe-squat", MONDAY).notes, "week 1")
        self.assertEqual(len(self.repo.list_for_date("client-1", MONDAY)), 2)
        self.assertIsNone(self.repo.get_notes("client-2", "pe-squat", MONDAY))

    def test_ids_containing_separators_do_not_collide(self):
        self.repo.save_notes("auth0|123", "pe-squat", MONDAY, "mine")
        self.repo.save_notes("auth0", "123|pe-squat", MONDAY, "theirs")
        self.assertEqual(self.repo.get_notes("auth0|123", "pe-squat", MONDAY).notes, "mine")
        self.assertEqual(self.repo.get_notes("auth0", "123|pe-squat", MONDAY).notes, "theirs")

    def test_store_accepts_any_string(self):
        self.repo.save_notes("client-1", "pe-squat", MONDAY, "   ")
        self.assertEqual(self.repo.get_notes("client-1", "pe-squat", MONDAY).notes, "   ")


if __name__ == '__main__':
    unittest.main()
