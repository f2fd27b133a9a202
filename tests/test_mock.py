import random
from unittest import TestCase

from jlands.common.exceptions import FillerError
from jlands.hr.mock import DEPARTMENTS, FIRST_NAMES, LAST_NAMES, Filler, departments, full_names, long_sequence
from jlands.hr.models import Manager


class TestFiller(TestCase):
    @staticmethod
    def _manager_filler(seed: int) -> Filler[Manager]:
        rng = random.Random(seed)
        return Filler(Manager) \
            .setter('id', long_sequence()) \
            .setter('department', departments(rng)) \
            .setter('name', full_names(rng))

    def test_happy_path(self):
        managers = self._manager_filler(1).list(1000)

        self.assertEqual(1000, len(managers))
        self.assertEqual(list(range(1000)), [m.id for m in managers])

        for manager in managers:
            self.assertIsInstance(manager, Manager)
            self.assertIn(manager.department, DEPARTMENTS)

            first_name, last_name = manager.name.split(' ')
            self.assertIn(first_name, FIRST_NAMES)
            self.assertIn(last_name, LAST_NAMES)

    def test_reproducible_with_seed(self):
        self.assertEqual(self._manager_filler(42).list(50), self._manager_filler(42).list(50))

    def test_stream_is_lazy(self):
        sequence = long_sequence(start=100, step=10)
        items = Filler(Manager).setter('id', sequence).stream(3)

        # The generator has not pulled anything from the supplier yet.
        self.assertEqual(100, sequence())

        self.assertEqual([110, 120, 130], [m.id for m in items])

    def test_unset_fields_stay_empty(self):
        manager = Filler(Manager).setter('name', lambda: 'Grace Hopper').one()

        self.assertEqual(Manager(name='Grace Hopper'), manager)
        self.assertIsNone(manager.id)
        self.assertIsNone(manager.department)

    def test_error_detection(self):
        with self.assertRaises(FillerError):
            Filler(Manager).setter('salary', long_sequence())

        with self.assertRaises(FillerError):
            Filler(Manager).setter('id', None)

        with self.assertRaises(FillerError):
            Filler(Manager).list(-1)

        with self.assertRaises(FillerError):
            Filler(Manager).stream(-1)

        self.assertEqual([], Filler(Manager).list(0))
