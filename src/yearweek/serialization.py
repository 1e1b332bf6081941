"""
Serialization helpers for template sets.

Provides lossless JSON/YAML round-trip via intermediate dict representation:

    name: mysql
    templates:
      year: YEAR({0})
      year_week_mysql: YEARWEEK({0}, 0)

Keys under ``templates`` are TemporalField values (lower-case names).
"""
from __future__ import annotations

import json
import warnings
from typing import Any, Dict

import yaml

from yearweek.model import TemporalField
from yearweek.templates import TemplateSet


def templates_to_dict(ts: TemplateSet) -> Dict[str, Any]:
    return {
        "name": ts.name,
        "templates": {f.value: t for f, t in ts.templates.items()},
    }


def templates_from_dict(d: Dict[str, Any]) -> TemplateSet:
    if not isinstance(d, dict):
        raise TypeError(f"Template set must be a mapping, got {type(d).__name__}")

    name = d.get("name", "")
    if not isinstance(name, str):
        raise TypeError(f"Template set name must be a string, got {type(name).__name__}")

    raw_templates = d.get("templates")
    if raw_templates is None:
        raw_templates = {}
    if not isinstance(raw_templates, dict):
        raise TypeError(f"Templates must be a mapping, got {type(raw_templates).__name__}")

    templates: Dict[TemporalField, str] = {}
    for key, template in raw_templates.items():
        try:
            temporal_field = TemporalField(key)
        except ValueError:
            warnings.warn(f"Ignoring unknown temporal field '{key}'", UserWarning)
            continue
        if not isinstance(template, str):
            raise TypeError(f"Template for '{key}' must be a string, got {type(template).__name__}")
        templates[temporal_field] = template

    return TemplateSet(name=name, templates=templates)


def templates_to_json(ts: TemplateSet) -> str:
    return json.dumps(templates_to_dict(ts), sort_keys=True)


def templates_from_json(s: str) -> TemplateSet:
    d = json.loads(s)
    return templates_from_dict(d)


def templates_to_yaml(ts: TemplateSet) -> str:
    return yaml.safe_dump(templates_to_dict(ts))


def templates_from_yaml(s: str) -> TemplateSet:
    d = yaml.safe_load(s)
    return templates_from_dict(d)
