# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Entity query models used by count/search operations."""

from __future__ import annotations

from typing import Any

from .base import Model, open_enum, register_type
from .enums import CriteriaOperator, EntityQueryFilterType, EntityQueryOrderByType


@register_type
class EntityQueryFilter(Model):
    type: open_enum(EntityQueryFilterType) | None = None
    children: list[EntityQueryFilter] | None = None
    field_name: str | None = None
    operator: open_enum(CriteriaOperator) | None = None
    value: Any = None

    @classmethod
    def leaf(cls, field_name: str, value: Any, operator: CriteriaOperator = CriteriaOperator.EQUALS) -> EntityQueryFilter:
        return cls(type=EntityQueryFilterType.LEAF, field_name=field_name, operator=operator, value=value)

    @classmethod
    def all_of(cls, *children: EntityQueryFilter) -> EntityQueryFilter:
        return cls(type=EntityQueryFilterType.AND, children=list(children))

    @classmethod
    def any_of(cls, *children: EntityQueryFilter) -> EntityQueryFilter:
        return cls(type=EntityQueryFilterType.OR, children=list(children))


@register_type
class EntityQueryOrderBy(Model):
    field_name: str | None = None
    sorting: open_enum(EntityQueryOrderByType) | None = None


@register_type
class EntityQuery(Model):
    filter: EntityQueryFilter | None = None
    language: str | None = None
    number_of_entities: int | None = None
    order_bys: list[EntityQueryOrderBy] | None = None
    starting_entity: int | None = None
