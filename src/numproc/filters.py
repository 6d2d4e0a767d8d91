"""
Number filters and the factory that builds them from command-line tokens.
"""

from abc import ABC, abstractmethod
from collections import namedtuple
from .common import parse_int
from .logger import logger


FilterSpec = namedtuple("FilterSpec", ["name", "argument"])


class FilterArgumentError(ValueError):
    """Unknown filter name or unusable filter argument."""


class FilterRangeError(FilterArgumentError, OverflowError):
    """Filter argument is numeric but outside the supported range."""


class NumberFilter(ABC):
    """Base class for number filters."""

    @abstractmethod
    def keep(self, number):
        """Return True if the number should be kept."""
        pass

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self):
        return hash((type(self), tuple(sorted(vars(self).items()))))

    def __repr__(self):
        state = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({state})"


class EvenNumberFilter(NumberFilter):
    def keep(self, number):
        return number % 2 == 0


class OddNumberFilter(NumberFilter):
    def keep(self, number):
        return number % 2 != 0


class GreaterThanFilter(NumberFilter):
    def __init__(self, threshold):
        self.threshold = threshold

    def keep(self, number):
        return number > self.threshold


def _create_greater_than(argument):
    try:
        threshold = parse_int(argument)
    except OverflowError:
        raise FilterRangeError(f"Argument out of range for GT filter: {argument}")
    except ValueError:
        raise FilterArgumentError(f"Invalid argument for GT filter: {argument}")
    return GreaterThanFilter(threshold)


class FilterFactory:
    """
    Registry of filter creators, keyed by filter name.

    A creator takes the argument string and returns a NumberFilter. New
    filter kinds are added with register() without touching existing ones.
    """

    def __init__(self):
        self.creators = {}
        self.register("EVEN", lambda argument: EvenNumberFilter())
        self.register("ODD", lambda argument: OddNumberFilter())
        self.register("GT", _create_greater_than)

    def register(self, name, creator):
        if name in self.creators:
            logger.debug(f"Replacing creator for filter {name}")
        self.creators[name] = creator

    @property
    def available_filters(self):
        return list(self.creators)

    def create(self, filter_type, argument=""):
        try:
            creator = self.creators[filter_type]
        except KeyError:
            raise FilterArgumentError(f"Unknown filter type: {filter_type}")
        number_filter = creator(argument)
        logger.debug(f"Created filter {number_filter!r}")
        return number_filter

    def create_from_spec(self, spec):
        return self.create(spec.name, spec.argument)


def parse_filter_spec(token):
    """
    Split a command-line filter token into a FilterSpec.

    GT10 becomes FilterSpec("GT", "10"); anything else is taken as a
    filter name with no argument.
    """
    if token.startswith("GT"):
        return FilterSpec("GT", token[2:])
    return FilterSpec(token, "")
