from __future__ import annotations

import pytest

from sajuengine.elements import (
    ELEMENT_CYCLE,
    Element,
    ElementRelation,
    coerce_element,
    controlled_by,
    controls,
    generated_by,
    generates,
    is_friendly,
    mediator,
    relation,
)
from sajuengine.exceptions import UnknownElementError


def test_cycle_offsets_from_wood() -> None:
    assert generates(Element.WOOD) is Element.FIRE
    assert generated_by(Element.WOOD) is Element.WATER
    assert controls(Element.WOOD) is Element.EARTH
    assert controlled_by(Element.WOOD) is Element.METAL


def test_cycle_wraps_at_water() -> None:
    assert generates(Element.WATER) is Element.WOOD
    assert controls(Element.WATER) is Element.FIRE
    assert controls(Element.METAL) is Element.WOOD


@pytest.mark.parametrize("reference", ELEMENT_CYCLE)
@pytest.mark.parametrize("target", ELEMENT_CYCLE)
def test_relation_is_total_and_mirrored(reference: Element, target: Element) -> None:
    mirrored = {
        ElementRelation.SAME: ElementRelation.SAME,
        ElementRelation.GENERATES: ElementRelation.GENERATED_BY,
        ElementRelation.GENERATED_BY: ElementRelation.GENERATES,
        ElementRelation.CONTROLS: ElementRelation.CONTROLLED_BY,
        ElementRelation.CONTROLLED_BY: ElementRelation.CONTROLS,
    }
    forward = relation(reference, target)
    assert relation(target, reference) is mirrored[forward]


def test_each_reference_sees_every_relation_once() -> None:
    for reference in ELEMENT_CYCLE:
        seen = {relation(reference, target) for target in ELEMENT_CYCLE}
        assert seen == set(ElementRelation)


def test_friendly_pairs() -> None:
    assert is_friendly(Element.WOOD, Element.WOOD)
    assert is_friendly(Element.WOOD, Element.FIRE)
    assert is_friendly(Element.FIRE, Element.WOOD)
    assert not is_friendly(Element.WOOD, Element.EARTH)
    assert not is_friendly(Element.METAL, Element.WOOD)


def test_mediator_bridges_control_relations() -> None:
    assert mediator(Element.WATER, Element.FIRE) is Element.WOOD
    assert mediator(Element.FIRE, Element.WATER) is Element.WOOD
    assert mediator(Element.METAL, Element.WOOD) is Element.WATER
    assert mediator(Element.WOOD, Element.FIRE) is None
    assert mediator(Element.EARTH, Element.EARTH) is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("wood", Element.WOOD),
        (" METAL ", Element.METAL),
        ("목", Element.WOOD),
        ("金", Element.METAL),
        (Element.WATER, Element.WATER),
    ],
)
def test_coerce_element(raw: object, expected: Element) -> None:
    assert coerce_element(raw) is expected


def test_coerce_element_rejects_unknown() -> None:
    with pytest.raises(UnknownElementError):
        coerce_element("plasma")


def test_labels() -> None:
    assert Element.WOOD.label() == "목(木)"
    assert Element.WATER.korean == "수"
    assert Element.FIRE.hanja == "火"
