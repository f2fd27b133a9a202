import random
from typing import Optional

import click

from jlands.cli.helpers.iterator_printer import OutputFormat, show_matches
from jlands.common.exceptions import FillerError
from jlands.common.logger import get_logger
from jlands.hr.mock import Filler, departments, full_names, long_sequence
from jlands.hr.models import Manager


@click.command('managers')
@click.option('-n', '--count', 'count', type=click.IntRange(min=0), default=1000, show_default=True,
              help='Number of mock managers to generate')
@click.option('-d', '--department', help='Only show the managers of this department (case-insensitive)')
@click.option('-p', '--name-prefix', help='Only show the managers whose full name starts with this prefix')
@click.option('--seed', type=int, help='Seed for the random generator, for a reproducible output')
@click.option('--limit', type=click.IntRange(min=1), help='Maximum number of managers to show')
@click.option('-o', '--output', type=click.Choice([OutputFormat.JSON, OutputFormat.YAML]),
              default=OutputFormat.DEFAULT_FOR_DATA, show_default=True, help='Output format')
def managers(count: int,
             department: Optional[str],
             name_prefix: Optional[str],
             seed: Optional[int],
             limit: Optional[int],
             output: str):
    """
    Generate mock managers and show the ones matching the given filters

    Every manager is shown with its position among all generated managers.
    """
    logger = get_logger('managers')
    rng = random.Random(seed)

    try:
        generated = Filler(Manager) \
            .setter('id', long_sequence()) \
            .setter('department', departments(rng)) \
            .setter('name', full_names(rng)) \
            .stream(count)
    except FillerError as e:
        raise click.UsageError(str(e))

    def is_selected(manager: Manager) -> bool:
        if department and (manager.department or '').lower() != department.lower():
            return False
        if name_prefix and not (manager.name or '').startswith(name_prefix):
            return False
        return True

    shown = show_matches(output, generated, is_selected, limit=limit)

    logger.debug(f'Shown {shown} out of {count} manager(s)')
