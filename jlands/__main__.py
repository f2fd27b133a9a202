import sys

import click

from jlands.cli.hr import managers
from jlands.common.logger import get_logger
from jlands.constants import __version__

APP_NAME = 'jlands'

__library_version = __version__
__python_version = str(sys.version).replace("\n", " ")
__app_signature = f'{APP_NAME} {__library_version} with Python {__python_version}'


@click.group(APP_NAME)
@click.version_option(__version__, message="%(version)s")
def jlands():
    """
    Streams & Lambdas examples
    """
    get_logger(APP_NAME).debug(__app_signature)


@jlands.command()
def version():
    """ Show the version of CLI/library """
    click.echo(__app_signature)


# noinspection PyTypeChecker
jlands.add_command(managers)

if __name__ == "__main__":
    jlands.main(prog_name=APP_NAME)
