"""Closed intervals used to describe Discord's documented limits."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

import attrs
from attrs import validators

_T = TypeVar("_T")


@attrs.define(frozen=True)
class Interval(Generic[_T]):
    """A closed interval `[minimum, maximum]`.

    Both bounds are inclusive, so `Interval(1, 100)` contains 1 and 100.
    """

    minimum: _T = attrs.field()
    maximum: _T = attrs.field()

    @maximum.validator
    def _maximum_not_below_minimum(self, attribute: attrs.Attribute, value: Any) -> None:
        """Validate that the interval is not empty."""
        del attribute  # unused
        if value < self.minimum:
            msg = f"The maximum {value!r} is smaller than the minimum {self.minimum!r}"
            raise ValueError(msg)

    def contains(self, value: _T) -> bool:
        """Check if the value lies within the interval.

        :param value: The value to check
        :return: `True` if `minimum <= value <= maximum`
        """
        return self.minimum <= value <= self.maximum

    def __str__(self) -> str:
        """Render the interval in its mathematical notation."""
        return f"[{self.minimum}, {self.maximum}]"


@attrs.define(frozen=True)
class Limit:
    """A named interval, e.g. the allowed length of a button label.

    The name is used in error messages, so it should read naturally in
    a sentence like "the length of the <name>".
    """

    name: str = attrs.field(validator=validators.instance_of(str))
    interval: Interval[int] = attrs.field(validator=validators.instance_of(Interval))
