"""
Mock data for the HR examples

A ``Filler`` builds model instances from a factory and a set of per-field suppliers, e.g.

    managers = Filler(Manager) \
        .setter('id', long_sequence()) \
        .setter('department', departments()) \
        .setter('name', full_names()) \
        .list(1000)
"""
import random
from itertools import count
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from pydantic import BaseModel

from jlands.common.exceptions import FillerError
from jlands.common.logger import get_logger_for

M = TypeVar('M', bound=BaseModel)

Supplier = Callable[[], Any]

DEPARTMENTS: Tuple[str, ...] = (
    'Accounting',
    'Customer Service',
    'Engineering',
    'Finance',
    'Human Resources',
    'Legal',
    'Marketing',
    'Operations',
    'Purchasing',
    'Research',
    'Sales',
)

FIRST_NAMES: Tuple[str, ...] = (
    'Ada', 'Alan', 'Barbara', 'Claude', 'Dennis', 'Donald', 'Edsger', 'Frances', 'Grace', 'Guido',
    'James', 'John', 'Ken', 'Linus', 'Margaret', 'Niklaus', 'Radia', 'Robin', 'Shafi', 'Tony',
)

LAST_NAMES: Tuple[str, ...] = (
    'Allen', 'Backus', 'Dijkstra', 'Gosling', 'Hamilton', 'Hoare', 'Hopper', 'Kernighan', 'Knuth', 'Liskov',
    'Lovelace', 'McCarthy', 'Milner', 'Perlman', 'Ritchie', 'Shannon', 'Thompson', 'Torvalds', 'Turing', 'Wirth',
)


def long_sequence(start: int = 0, step: int = 1) -> Supplier:
    """ Supply ``start``, ``start + step``, ``start + 2 * step`` and so on """
    counter = count(start, step)
    return lambda: next(counter)


def departments(rng: Optional[random.Random] = None) -> Supplier:
    rng = rng or random.Random()
    return lambda: rng.choice(DEPARTMENTS)


def full_names(rng: Optional[random.Random] = None) -> Supplier:
    rng = rng or random.Random()
    return lambda: f'{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}'


class Filler(Generic[M]):
    def __init__(self, factory: Callable[[], M]):
        self.__logger = get_logger_for(self)
        self.__factory = factory
        self.__setters: Dict[str, Supplier] = dict()

    def setter(self, field_name: str, supplier: Supplier) -> 'Filler[M]':
        if supplier is None:
            raise FillerError(f'No supplier given for "{field_name}"')

        model_type = self.__factory if isinstance(self.__factory, type) else None
        if model_type is not None and issubclass(model_type, BaseModel) and field_name not in model_type.model_fields:
            self.__logger.error(f'{model_type.__name__} has no field called "{field_name}"')
            raise FillerError(f'Unknown field: {field_name} (expected: {", ".join(model_type.model_fields)})')

        self.__setters[field_name] = supplier

        return self

    def one(self) -> M:
        instance = self.__factory()

        for field_name, supplier in self.__setters.items():
            setattr(instance, field_name, supplier())

        return instance

    def stream(self, size: int) -> Iterator[M]:
        """ Lazily produce the given number of items, one item per iteration """
        self.__check_size(size)

        return (self.one() for _ in range(size))

    def list(self, size: int) -> List[M]:
        self.__check_size(size)

        self.__logger.debug(f'Filling {size} item(s)')

        return [self.one() for _ in range(size)]

    def __check_size(self, size: int):
        if size < 0:
            raise FillerError(f'The size must not be negative (given: {size})')
