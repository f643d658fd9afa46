"""Schemas for people and for a directory of poets keyed by name.

A person record looks like::

    {"birth_year": 1792, "start_year": 1810, "death_year": 1822}

The birth year must fall within a configurable range, the start year must
come after the birth year, and the optional death year must not precede it.
The poets document maps each poet's name to a person record.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..checks import integers, strings
from ..core.base_schema import BaseSchema
from ..core.validation import Validatable, Validator, apply, valid, validator
from ..utils.dynamic import dict_of, field, integer, json_object, optional_field

BIRTH_YEAR_OUT_OF_RANGE = "birth year out of range"
START_YEAR_NOT_AFTER_BIRTH = "start year must be after birth year"
DEATH_YEAR_BEFORE_BIRTH = "death year must not precede birth year"


@dataclass(frozen=True)
class Person:
    birth_year: int
    start_year: int
    death_year: Optional[int] = None


def person_validator(min_birth_year: int = 1600, max_birth_year: int = 2023) -> Validator[Any, Person, str]:
    """Builds the validator for a single person record.

    The start and death years are checked against the validated birth year,
    so they are decoded only after it.

    Args:
        min_birth_year (int): The earliest accepted birth year.
        max_birth_year (int): The latest accepted birth year.

    Returns:
        Validator[Any, Person, str]: A validator producing a `Person`.
    """
    record = json_object("person must be an object")
    birth_year = field(
        "birth_year",
        integers.in_range(integer("birth_year must be an integer"), min_birth_year, max_birth_year, BIRTH_YEAR_OUT_OF_RANGE),
        "birth_year is required",
    )

    def start_year(birth: int) -> Validator[Any, int, str]:
        return field(
            "start_year",
            integers.greater_than(integer("start_year must be an integer"), birth, START_YEAR_NOT_AFTER_BIRTH),
            "start_year is required",
        )

    def death_year(birth: int) -> Validator[Any, Optional[int], str]:
        return optional_field(
            "death_year",
            integers.minimum(integer("death_year must be an integer"), birth, DEATH_YEAR_BEFORE_BIRTH),
        )

    def build(value: Any) -> Validatable[Person, str]:
        return apply(record, value)(lambda data:
            apply(birth_year, data)(lambda birth:
                apply(start_year(birth), data)(lambda start:
                    apply(death_year(birth), data)(lambda death:
                        valid(Person(birth, start, death))))))
    return build


def poets_validator(min_birth_year: int = 1600, max_birth_year: int = 2023) -> Validator[Any, Dict[str, Person], str]:
    """Builds the validator for a mapping of poet names to person records."""
    name = strings.not_blank(validator(), "poet name must not be blank")
    return dict_of(person_validator(min_birth_year, max_birth_year), "poets document must be an object", name)


class PersonSchema(BaseSchema):
    """A single person record."""

    name = "person"
    description = "A person with a birth year, a start year and an optional death year."

    def build(self) -> Validator[Any, Person, str]:
        return person_validator(
            self.config.get("poets.min_birth_year", 1600),
            self.config.get("poets.max_birth_year", 2023),
        )


class PoetsSchema(BaseSchema):
    """A directory of poets keyed by name."""

    name = "poets"
    description = "A mapping of poet names to person records."

    def build(self) -> Validator[Any, Dict[str, Person], str]:
        return poets_validator(
            self.config.get("poets.min_birth_year", 1600),
            self.config.get("poets.max_birth_year", 2023),
        )
