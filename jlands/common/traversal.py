from typing import Any, Callable, Iterable, Optional, TypeVar

from jlands.common.exceptions import TraversalArgumentError
from jlands.common.logger import get_logger

T = TypeVar('T')

_logger = get_logger('Traversal')


def for_each_matching(source: Iterable[T],
                      predicate: Callable[[T], Any],
                      handler: Callable[[int, T], None]) -> None:
    """ Invoke the handler on every element of the source that satisfies the predicate

        The handler receives the position of the element in the source, not the number of matches so far. For
        example, with ``['abc', 'det', 'delo', 'itte']`` and a predicate checking for the prefix "d", the handler is
        called with ``(1, 'det')`` and then ``(2, 'delo')``.

        The source is consumed one element at a time, so lazy sources like generators are fine. Any exception raised
        by the predicate or the handler stops the traversal and is re-raised as is.

        :raises TraversalArgumentError: if any argument is missing, before the source is consumed.
    """
    check_traversal_arguments(source=source, predicate=predicate, handler=handler)

    _logger.debug('BEGIN')

    for index, element in enumerate(source):
        if predicate(element):
            handler(index, element)

    _logger.debug('END')


def check_traversal_arguments(source: Optional[Iterable[Any]] = None, **callables: Optional[Callable]):
    if source is None:
        _logger.error('No source given')
        raise TraversalArgumentError('source')

    if not isinstance(source, Iterable):
        _logger.error(f'The given source ({type(source).__name__}) is not iterable')
        raise TraversalArgumentError('source', 'must be iterable')

    check_callables(**callables)


def check_callables(**callables: Optional[Callable]):
    for name, executable in callables.items():
        if executable is None:
            _logger.error(f'No {name} given')
            raise TraversalArgumentError(name)

        if not callable(executable):
            _logger.error(f'The given {name} ({type(executable).__name__}) is not callable')
            raise TraversalArgumentError(name, 'must be callable')
