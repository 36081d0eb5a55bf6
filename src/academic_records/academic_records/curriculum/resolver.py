"""Resolve display names and effective statuses of modules and seminars.

Statuses are only read here: instructors and admins set them directly, the
resolver never moves an item from one state to another.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Optional, Sequence

from ..core.enums import ItemStatus
from .model import CatalogModule, ModuleAssignment, ResolvedItem, SeminarOverride, SeminarRecord

logger = logging.getLogger(__name__)

MODULE = "module"
SEMINAR = "seminar"


def build_catalog(
    career_modules: Iterable[CatalogModule],
    general_modules: Iterable[CatalogModule] = (),
) -> dict[str, CatalogModule]:
    """Union of career-specific and general modules keyed by id (career entries win)."""
    catalog: dict[str, CatalogModule] = {}
    for m in career_modules:
        catalog.setdefault(m.module_id, m)
    for m in general_modules:
        catalog.setdefault(m.module_id, m)
    return catalog


def resolve_modules(assignments: Iterable[ModuleAssignment], catalog: dict[str, CatalogModule]) -> list[ResolvedItem]:
    out = []
    for a in assignments:
        module = catalog.get(a.module_id)
        if module is None:
            logger.debug("Dropping orphaned module assignment %s", a.module_id)
            continue
        out.append(
            ResolvedItem(
                item_id=module.module_id,
                name=module.name,
                status=a.status,
                kind=MODULE,
                semester=module.semester,
                teacher=module.teacher,
                hours=module.hours,
            )
        )
    return out


def resolve_catalog_modules(
    career_modules: Iterable[CatalogModule], assignments: Iterable[ModuleAssignment]
) -> list[ResolvedItem]:
    """Every module of the career, in catalog order; unassigned modules are pending."""
    statuses: dict[str, ItemStatus] = {}
    for a in assignments:
        statuses.setdefault(a.module_id, a.status)
    return [
        ResolvedItem(
            item_id=m.module_id,
            name=m.name,
            status=statuses.get(m.module_id, ItemStatus.PENDING),
            kind=MODULE,
            semester=m.semester,
            teacher=m.teacher,
            hours=m.hours,
        )
        for m in career_modules
    ]


def find_override(seminar: SeminarRecord, overrides: Sequence[SeminarOverride]) -> Optional[SeminarOverride]:
    """Match by id; legacy entries without a matching id are matched by name and semester."""
    for o in overrides:
        if o.seminar_id is not None and o.seminar_id == seminar.seminar_id:
            return o
    for o in overrides:
        if o.name is not None and o.name == seminar.name and o.semester == seminar.semester:
            return o
    return None


def resolve_seminars(seminars: Iterable[SeminarRecord], overrides: Sequence[SeminarOverride] = ()) -> list[ResolvedItem]:
    out = []
    for s in seminars:
        merged = s
        override = find_override(s, overrides)
        if override is not None:
            # The catalog id stays authoritative; any other field the student set wins.
            changes = {
                k: v
                for k, v in {
                    "name": override.name,
                    "teacher": override.teacher,
                    "hours": override.hours,
                    "semester": override.semester,
                    "status": override.status,
                }.items()
                if v is not None
            }
            merged = replace(s, **changes)
        out.append(
            ResolvedItem(
                item_id=merged.seminar_id,
                name=merged.name,
                status=merged.status or ItemStatus.PENDING,
                kind=SEMINAR,
                semester=merged.semester,
                teacher=merged.teacher,
                hours=merged.hours,
            )
        )
    return out


def with_status(items: Iterable[ResolvedItem], status: ItemStatus) -> list[ResolvedItem]:
    return [i for i in items if i.status == status]


def recognition_count(modules: Iterable[ResolvedItem], seminars: Iterable[ResolvedItem]) -> int:
    """Reconocimientos: approved modules plus approved seminars."""
    return len(with_status(modules, ItemStatus.APPROVED)) + len(with_status(seminars, ItemStatus.APPROVED))


def in_progress_names(modules: Iterable[ResolvedItem]) -> list[str]:
    """Unique names of the modules currently in progress, in order."""
    names: list[str] = []
    for m in with_status(modules, ItemStatus.IN_PROGRESS):
        if m.name not in names:
            names.append(m.name)
    return names


def collective_status(statuses: Iterable[ItemStatus]) -> ItemStatus:
    """Status of a module/seminar across every student assigned to it."""
    values = list(statuses)
    if not values:
        return ItemStatus.PENDING
    if all(s == ItemStatus.APPROVED for s in values):
        return ItemStatus.APPROVED
    if all(s == ItemStatus.IN_PROGRESS for s in values):
        return ItemStatus.IN_PROGRESS
    if any(s == ItemStatus.PENDING for s in values):
        return ItemStatus.PENDING
    return ItemStatus.IN_PROGRESS
