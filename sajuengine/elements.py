"""Five-element (五行) algebra.

The elements sit on a fixed cycle ``WOOD -> FIRE -> EARTH -> METAL -> WATER``.
Every relation between two elements is an offset on that cycle:

* ``+1`` generates (相生), ``-1`` is generated by
* ``+2`` controls (相剋), ``-2`` is controlled by
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import Final, Mapping

from .exceptions import UnknownElementError

__all__ = [
    "Element",
    "ElementRelation",
    "Polarity",
    "ELEMENT_CYCLE",
    "ELEMENT_LABELS",
    "coerce_element",
    "controlled_by",
    "controls",
    "generated_by",
    "generates",
    "is_friendly",
    "mediator",
    "relation",
]


class Element(StrEnum):
    WOOD = "WOOD"
    FIRE = "FIRE"
    EARTH = "EARTH"
    METAL = "METAL"
    WATER = "WATER"

    @property
    def korean(self) -> str:
        return ELEMENT_LABELS[self][0]

    @property
    def hanja(self) -> str:
        return ELEMENT_LABELS[self][1]

    def label(self) -> str:
        """Return the display label, e.g. ``목(木)``."""

        korean, hanja = ELEMENT_LABELS[self]
        return f"{korean}({hanja})"


class Polarity(StrEnum):
    YANG = "YANG"
    YIN = "YIN"


class ElementRelation(StrEnum):
    """Directed relation of a target element as seen from a reference element."""

    SAME = "same"
    GENERATES = "generates"
    GENERATED_BY = "generated_by"
    CONTROLS = "controls"
    CONTROLLED_BY = "controlled_by"


ELEMENT_CYCLE: Final[tuple[Element, ...]] = (
    Element.WOOD,
    Element.FIRE,
    Element.EARTH,
    Element.METAL,
    Element.WATER,
)

ELEMENT_LABELS: Final[Mapping[Element, tuple[str, str]]] = MappingProxyType(
    {
        Element.WOOD: ("목", "木"),
        Element.FIRE: ("화", "火"),
        Element.EARTH: ("토", "土"),
        Element.METAL: ("금", "金"),
        Element.WATER: ("수", "水"),
    }
)

_INDEX: Final[Mapping[Element, int]] = MappingProxyType(
    {element: idx for idx, element in enumerate(ELEMENT_CYCLE)}
)

_ALIASES: Final[Mapping[str, Element]] = MappingProxyType(
    {
        **{element.value: element for element in ELEMENT_CYCLE},
        **{korean: element for element, (korean, _) in ELEMENT_LABELS.items()},
        **{hanja: element for element, (_, hanja) in ELEMENT_LABELS.items()},
    }
)


def _offset(element: Element, step: int) -> Element:
    return ELEMENT_CYCLE[(_INDEX[element] + step) % len(ELEMENT_CYCLE)]


def generates(element: Element) -> Element:
    """Return the element that ``element`` produces."""

    return _offset(element, 1)


def generated_by(element: Element) -> Element:
    """Return the element that produces ``element``."""

    return _offset(element, -1)


def controls(element: Element) -> Element:
    """Return the element that ``element`` overcomes."""

    return _offset(element, 2)


def controlled_by(element: Element) -> Element:
    """Return the element that overcomes ``element``."""

    return _offset(element, -2)


def relation(reference: Element, target: Element) -> ElementRelation:
    """Classify ``target`` relative to ``reference``.

    The mapping is total over the five elements; the trailing assertion only
    fires if the cycle tables are corrupted.
    """

    if reference == target:
        return ElementRelation.SAME
    if generates(reference) == target:
        return ElementRelation.GENERATES
    if generated_by(reference) == target:
        return ElementRelation.GENERATED_BY
    if controls(reference) == target:
        return ElementRelation.CONTROLS
    if controlled_by(reference) == target:
        return ElementRelation.CONTROLLED_BY
    raise AssertionError(f"no relation between {reference!r} and {target!r}")


def is_friendly(first: Element, second: Element) -> bool:
    """Return ``True`` when the pair is identical or in a generating relation."""

    return relation(first, second) in (
        ElementRelation.SAME,
        ElementRelation.GENERATES,
        ElementRelation.GENERATED_BY,
    )


def mediator(first: Element, second: Element) -> Element | None:
    """Return the element that bridges a control relation between two elements.

    Water controls Fire; Wood is generated by Water and generates Fire, so it
    relieves the clash. Pairs without a control relation have no mediator.
    """

    rel = relation(first, second)
    if rel is ElementRelation.CONTROLS:
        return generates(first)
    if rel is ElementRelation.CONTROLLED_BY:
        return generates(second)
    return None


def coerce_element(value: Element | str) -> Element:
    """Return ``value`` as an :class:`Element`.

    Accepts enum members, case-insensitive codes (``"wood"``) and the Korean or
    hanja single-character labels (``"목"``, ``"木"``).
    """

    if isinstance(value, Element):
        return value
    text = str(value).strip()
    element = _ALIASES.get(text.upper()) or _ALIASES.get(text)
    if element is None:
        raise UnknownElementError(f"Unknown element: {value!r}")
    return element
