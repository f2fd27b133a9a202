import io
import json
from contextlib import redirect_stdout
from typing import List
from unittest import TestCase

import yaml

from jlands.cli.helpers.iterator_printer import OutputFormat, show_matches


class TestShowMatches(TestCase):
    def setUp(self) -> None:
        self.pulled: List[int] = []

    def _source(self, size: int):
        for i in range(size):
            self.pulled.append(i)
            yield i

    def _show(self, output_format: str, *args, **kwargs):
        buffer = io.StringIO()

        with redirect_stdout(buffer):
            shown = show_matches(output_format, *args, **kwargs)

        return shown, buffer.getvalue()

    def test_stop_pulling_once_limit_reached(self):
        shown, output = self._show(OutputFormat.JSON,
                                   self._source(1000),
                                   lambda i: i < 3 or i == 999,
                                   limit=3)

        self.assertEqual(3, shown)
        self.assertEqual([0, 1, 2], [row['index'] for row in json.loads(output)])
        # Nothing is pulled from the source after the last shown item.
        self.assertEqual([0, 1, 2], self.pulled)

    def test_source_index(self):
        shown, output = self._show(OutputFormat.YAML, self._source(10), lambda i: i % 4 == 1)

        self.assertEqual(3, shown)
        self.assertEqual([dict(index=1, item=1), dict(index=5, item=5), dict(index=9, item=9)],
                         yaml.safe_load(output))
        self.assertEqual(10, len(self.pulled))

    def test_unknown_output_format(self):
        with self.assertRaises(ValueError):
            show_matches('csv', [], bool)
