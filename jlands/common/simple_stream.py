from dataclasses import dataclass

from typing import TypeVar, Iterable, Callable, List, Dict, Any, Optional, Iterator

from jlands.common.logger import TraceableLogger
from jlands.common.traversal import check_callables, check_traversal_arguments, for_each_matching

T = TypeVar('T')
X = TypeVar('X')
Y = TypeVar('Y')
Z = TypeVar('Z')


class SimpleStream:
    """
    Simple Stream

    Intermediate operations (filter, map and peek) are only recorded. They are applied lazily, in the order they are
    declared, one element at a time when a terminal operation runs. A stream can be run more than once as long as
    its source can be iterated more than once.
    """

    def __init__(self, source: Iterable[T]):
        check_traversal_arguments(source=source)

        self._source = source
        self._operations: List[Operation] = []
        self._alias = f'{type(self).__name__}/{hash(self)}'
        self._logger = TraceableLogger.make(type(self).__name__, trace_id=str(hash(self)))

    def peek(self, executable: Callable[[X], None]):
        return self._add('peek', executable)

    def filter(self, executable: Callable[[X], bool]):
        return self._add('filter', executable)

    def map(self, executable: Callable[[X], Y]):
        return self._add('map', executable)

    def run(self):
        for __ in self._run():
            pass  # Only the side effects of the operations matter here.

    def to_iter(self) -> Iterator[Any]:
        for item in self._run():
            yield item

    def to_list(self) -> List[Any]:
        return [item for item in self._run()]

    def to_map(self, key_mapper: Callable[[X], Y], value_mapper: Callable[[X], Z]) -> Dict[Y, Z]:
        check_callables(key_mapper=key_mapper, value_mapper=value_mapper)

        result: Dict[Y, Z] = dict()

        for item in self._run():
            result[key_mapper(item)] = value_mapper(item)

        return result

    def find_first(self) -> Any:
        for item in self._run():
            return item
        return None

    def any_matched(self) -> bool:
        for __ in self._run():
            return True
        return False

    def count(self) -> int:
        return sum(1 for __ in self._run())

    def for_each(self, executable: Callable[[X], None]):
        check_callables(executable=executable)

        for item in self._run():
            executable(item)

    def for_each_indexed(self,
                         handler: Callable[[int, X], None],
                         predicate: Optional[Callable[[X], bool]] = None):
        """ Invoke the handler with the position and the value of every item coming out of the stream

            When the predicate is given, only the matching items are handled but the position still counts every
            item coming out of the stream.
        """
        for_each_matching(self._run(), predicate or _accept_all, handler)

    def _add(self, op: str, executable: Callable):
        check_callables(**{op: executable})
        self._operations.append(Operation(op=op, executable=executable))
        self._logger.debug(f'ADD {op}')
        return self

    def _run(self):
        self._logger.debug(f'RUN with {len(self._operations)} operation(s)')

        for item in self._source:
            included = True
            result = item

            for operation in self._operations:
                if operation.op == 'peek':
                    operation.executable(result)
                elif operation.op == 'filter':
                    included = operation.executable(result)
                elif operation.op == 'map':
                    result = operation.executable(result)

                if not included:
                    break

            if included:
                yield result

    def __repr__(self):
        return self._alias


def _accept_all(_: Any) -> bool:
    return True


@dataclass(frozen=True)
class Operation:
    op: str
    executable: Callable
