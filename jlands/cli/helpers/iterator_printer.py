from typing import Any, Callable, Iterable, Optional

import click

from jlands.cli.helpers.exporter import normalize, to_json, to_yaml
from jlands.common.traversal import for_each_matching
from jlands.feature_flags import in_interactive_shell, cli_show_list_item_index


def show_matches(output_format: str,
                 iterator: Iterable[Any],
                 predicate: Callable[[Any], bool],
                 limit: Optional[int] = None) -> int:
    """ Display the items matching the predicate, each with its position in the iterator """
    if output_format == OutputFormat.JSON:
        printer = JsonIteratorPrinter()
    elif output_format == OutputFormat.YAML:
        printer = YamlIteratorPrinter()
    else:
        raise ValueError(f'The given output format ({output_format}) is not available.')

    return printer.print(iterator, predicate, limit=limit)


class OutputFormat:
    JSON = 'json'
    YAML = 'yaml'

    DEFAULT_FOR_DATA = JSON


class _LimitReached(Exception):
    """ Stop the traversal once the printer has shown enough items """


class BaseIteratorPrinter:
    def print(self,
              iterator: Iterable[Any],
              predicate: Callable[[Any], bool],
              limit: Optional[int] = None) -> int:
        row_count = 0

        def handle(index: int, item: Any):
            nonlocal row_count

            self._print_row(row_count, normalize(dict(index=index, item=item)))

            if in_interactive_shell and cli_show_list_item_index:
                click.secho(f' # {index}', dim=True, err=True, nl=False)

            self._end_row()

            row_count += 1

            if limit and row_count >= limit:
                raise _LimitReached()

        try:
            for_each_matching(iterator, predicate, handle)
        except _LimitReached:
            pass  # Expected when the limit is set.

        self._close(row_count)

        return row_count

    def _print_row(self, row_count: int, normalized: Any):
        raise NotImplementedError()

    def _end_row(self):
        pass

    def _close(self, row_count: int):
        raise NotImplementedError()


class JsonIteratorPrinter(BaseIteratorPrinter):
    def _print_row(self, row_count: int, normalized: Any):
        if row_count == 0:
            # First row
            click.echo('[')
        else:
            click.echo(',')

        click.echo(
            '\n'.join([
                f'  {line}'
                for line in to_json(normalized).split('\n')
            ]),
            nl=False
        )

    def _close(self, row_count: int):
        if row_count == 0:
            click.echo('[]')
        else:
            click.echo('\n]')


class YamlIteratorPrinter(BaseIteratorPrinter):
    def _print_row(self, row_count: int, normalized: Any):
        click.echo('- ', nl=False)
        click.echo(
            '\n'.join([
                f'  {line}'
                for line in to_yaml(normalized).split('\n')
            ]).strip(),
            nl=False
        )

    def _end_row(self):
        click.echo()

    def _close(self, row_count: int):
        if row_count == 0:
            click.echo('[]')
