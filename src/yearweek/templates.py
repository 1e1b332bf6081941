"""
Expression Templates

Maps each TemporalField to a textual expression template for a target
language. Placeholders are positional: {0} is the date/time operand.

A TemplateSet is a plain immutable value. Build one with a factory
(python_templates, mysql_templates), derive variants with
with_template(), or load one from YAML/JSON via yearweek.serialization,
then hand it explicitly to whatever renders expressions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .model import TemporalField


class UnknownFieldError(KeyError):
    """Raised when rendering a field the template set has no template for."""
    pass


@dataclass(frozen=True)
class TemplateSet:
    """
    Immutable mapping from TemporalField to expression template.

    Properties:
        name: Identifier of the target dialect (e.g. "python", "mysql")
        templates: Field -> template text, e.g. "YEAR({0})"
    """

    name: str
    templates: Mapping[TemporalField, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze a private copy so callers cannot mutate the set afterwards
        object.__setattr__(self, "templates", MappingProxyType(dict(self.templates)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TemplateSet):
            return NotImplemented
        return self.name == other.name and dict(self.templates) == dict(other.templates)

    def __hash__(self) -> int:
        return hash((self.name, frozenset(self.templates.items())))

    def fields(self) -> List[TemporalField]:
        return list(self.templates)

    def get(self, temporal_field: TemporalField) -> Optional[str]:
        return self.templates.get(temporal_field)

    def render(self, temporal_field: TemporalField, *args: str) -> str:
        """
        Render the template for a field.

        Args:
            temporal_field: Field to extract
            *args: Operand texts substituted for {0}, {1}, ...

        Returns:
            Expression text

        Raises:
            UnknownFieldError: If this set has no template for the field
        """
        template = self.templates.get(temporal_field)
        if template is None:
            raise UnknownFieldError(f"No {self.name} template for {temporal_field.name}")
        return template.format(*args)

    def with_template(self, temporal_field: TemporalField, template: str) -> TemplateSet:
        """Return a new set with one template added or replaced."""
        templates: Dict[TemporalField, str] = dict(self.templates)
        templates[temporal_field] = template
        return TemplateSet(name=self.name, templates=templates)


def python_templates() -> TemplateSet:
    """
    Python expressions over a date/datetime operand.

    YEAR_WEEK_MYSQL renders as a call to mysql_year_week, so the rendered
    text must be evaluated with yearweek.engine.mysql_year_week in scope.
    """
    return TemplateSet(
        name="python",
        templates={
            TemporalField.YEAR: "{0}.year",
            TemporalField.MONTH: "{0}.month",
            TemporalField.WEEK: "{0}.isocalendar()[1]",
            TemporalField.DAY_OF_WEEK: "{0}.isoweekday()",
            TemporalField.DAY_OF_MONTH: "{0}.day",
            TemporalField.DAY_OF_YEAR: "{0}.timetuple().tm_yday",
            TemporalField.HOUR: "{0}.hour",
            TemporalField.MINUTE: "{0}.minute",
            TemporalField.SECOND: "{0}.second",
            TemporalField.MILLISECOND: "({0}.microsecond // 1000)",
            TemporalField.YEAR_MONTH: "({0}.year * 100 + {0}.month)",
            TemporalField.YEAR_WEEK: "({0}.isocalendar()[0] * 100 + {0}.isocalendar()[1])",
            TemporalField.YEAR_WEEK_MYSQL: "mysql_year_week({0})",
        },
    )


def mysql_templates() -> TemplateSet:
    """MySQL/MariaDB SQL fragments over a DATE/DATETIME column."""
    return TemplateSet(
        name="mysql",
        templates={
            TemporalField.YEAR: "YEAR({0})",
            TemporalField.MONTH: "MONTH({0})",
            TemporalField.WEEK: "WEEK({0}, 3)",
            TemporalField.DAY_OF_WEEK: "(WEEKDAY({0}) + 1)",
            TemporalField.DAY_OF_MONTH: "DAYOFMONTH({0})",
            TemporalField.DAY_OF_YEAR: "DAYOFYEAR({0})",
            TemporalField.HOUR: "HOUR({0})",
            TemporalField.MINUTE: "MINUTE({0})",
            TemporalField.SECOND: "SECOND({0})",
            TemporalField.MILLISECOND: "FLOOR(MICROSECOND({0}) / 1000)",
            TemporalField.YEAR_MONTH: "EXTRACT(YEAR_MONTH FROM {0})",
            TemporalField.YEAR_WEEK: "YEARWEEK({0}, 3)",
            TemporalField.YEAR_WEEK_MYSQL: "YEARWEEK({0}, 0)",
        },
    )
