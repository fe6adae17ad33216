"""Five-role (用神 / 喜神 / 忌神 / 仇神 / 閑神) element grading.

A chart's favourable element (yongshin) fixes the other four roles:

* heeshin produces the yongshin
* gishin overcomes the yongshin
* gushin produces the gishin
* hansin is whichever element is left over

Every date, name character or decade is then graded 1-5 by the role its
element plays.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Final, Mapping

from .elements import ELEMENT_CYCLE, Element, controlled_by, generated_by, generates

LOG = logging.getLogger(__name__)

__all__ = [
    "FiveRoleSystem",
    "GRADE_DESCRIPTIONS",
    "GRADE_STARS",
    "NotComputable",
    "Role",
    "YongshinGrade",
    "build_role_system",
    "grade_element",
    "grade_of",
    "resolve_role_system",
    "role_of",
    "stars_for",
]


class Role(StrEnum):
    YONGSHIN = "yongshin"
    HEESHIN = "heeshin"
    GISHIN = "gishin"
    GUSHIN = "gushin"
    HANSIN = "hansin"


GRADE_STARS: Final[Mapping[int, str]] = MappingProxyType(
    {
        5: "★★★★★",
        4: "★★★★☆",
        3: "★★★☆☆",
        2: "★★☆☆☆",
        1: "★☆☆☆☆",
    }
)

GRADE_DESCRIPTIONS: Final[Mapping[int, str]] = MappingProxyType(
    {
        5: "최고로 좋은 기운",
        4: "아주 좋은 기운",
        3: "보통 수준의 기운",
        2: "다소 주의가 필요한 기운",
        1: "조심해야 할 기운",
    }
)


@dataclass(frozen=True)
class NotComputable:
    """Marker returned instead of a score when a required input is missing."""

    reason: str

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class FiveRoleSystem:
    """Resolved role assignment.

    ``ambiguous`` is set when overrides collide so that the five roles no
    longer cover five distinct elements; ``hansin`` then falls back to the
    element the yongshin produces.
    """

    yongshin: Element
    heeshin: Element
    gishin: Element
    gushin: Element
    hansin: Element
    ambiguous: bool = False

    def as_mapping(self) -> dict[Role, Element]:
        return {
            Role.YONGSHIN: self.yongshin,
            Role.HEESHIN: self.heeshin,
            Role.GISHIN: self.gishin,
            Role.GUSHIN: self.gushin,
            Role.HANSIN: self.hansin,
        }


@dataclass(frozen=True)
class YongshinGrade:
    element: Element
    grade: int
    role: Role
    stars: str
    description: str


def build_role_system(
    yongshin: Element,
    heeshin: Element | None = None,
    gishin: Element | None = None,
    gushin: Element | None = None,
) -> FiveRoleSystem:
    """Derive the five roles from ``yongshin`` and optional explicit overrides."""

    hee = heeshin or generated_by(yongshin)
    gi = gishin or controlled_by(yongshin)
    gu = gushin or generated_by(gi)

    assigned = {yongshin, hee, gi, gu}
    remaining = [element for element in ELEMENT_CYCLE if element not in assigned]
    if len(remaining) == 1:
        return FiveRoleSystem(yongshin, hee, gi, gu, remaining[0])

    fallback = generates(yongshin)
    LOG.warning(
        "role overrides collide (yongshin=%s heeshin=%s gishin=%s gushin=%s); "
        "%d elements unassigned, hansin falls back to %s",
        yongshin,
        hee,
        gi,
        gu,
        len(remaining),
        fallback,
    )
    return FiveRoleSystem(yongshin, hee, gi, gu, fallback, ambiguous=True)


def resolve_role_system(
    yongshin: Element | None,
    heeshin: Element | None = None,
    gishin: Element | None = None,
    gushin: Element | None = None,
) -> FiveRoleSystem | NotComputable:
    """Like :func:`build_role_system` but tolerant of a missing yongshin."""

    if yongshin is None:
        return NotComputable("yongshin is not determined")
    return build_role_system(yongshin, heeshin, gishin, gushin)


def grade_of(element: Element, system: FiveRoleSystem) -> int:
    """Return the 1-5 grade of ``element``; unmatched elements grade 3.

    When overrides make roles collide, yongshin wins over gishin and gishin
    wins over heeshin and gushin.
    """

    if element == system.yongshin:
        return 5
    if element == system.gishin:
        return 1
    if element == system.heeshin:
        return 4
    if element == system.gushin:
        return 2
    return 3


def role_of(element: Element, system: FiveRoleSystem) -> Role:
    if element == system.yongshin:
        return Role.YONGSHIN
    if element == system.gishin:
        return Role.GISHIN
    if element == system.heeshin:
        return Role.HEESHIN
    if element == system.gushin:
        return Role.GUSHIN
    return Role.HANSIN


def stars_for(grade: int) -> str:
    return GRADE_STARS[max(1, min(5, grade))]


def grade_element(element: Element, system: FiveRoleSystem) -> YongshinGrade:
    grade = grade_of(element, system)
    return YongshinGrade(
        element=element,
        grade=grade,
        role=role_of(element, system),
        stars=GRADE_STARS[grade],
        description=GRADE_DESCRIPTIONS[grade],
    )
