"""
Property-based tests for prompt section types.

Tests the section value types and their serialization metadata using hypothesis.
"""

import dataclasses

import allure
import pytest
from hypothesis import given, settings, strategies as st

from bank_prompts.prompts.sections import (
    Context,
    Example,
    Goal,
    Output,
    PromptSection,
    Role,
    SECTION_TYPES,
    Step,
)


TEXT_SECTION_TYPES = [Goal, Context, Role, Step, Output]


# **Feature: prompt-sections, Property 1: Canonical order is fixed**
@allure.feature("Prompt Sections")
@allure.story("Canonical order")
@allure.severity(allure.severity_level.CRITICAL)
def test_canonical_order_is_goal_context_role_steps_examples_output():
    """
    Property 1: Canonical order is fixed

    The order values of the section types SHALL sort them as
    Goal, Context, Role, Step, Example, Output.
    """
    expected = [Goal, Context, Role, Step, Example, Output]
    assert sorted(expected, key=lambda cls: cls.order) == expected
    assert list(SECTION_TYPES.values()) == expected


# **Feature: prompt-sections, Property 2: Sections are immutable values**
@allure.feature("Prompt Sections")
@allure.story("Value semantics")
@settings(max_examples=100)
@given(
    section_type=st.sampled_from(TEXT_SECTION_TYPES),
    text=st.text(max_size=50),
)
def test_text_sections_are_immutable_values(section_type, text: str):
    """
    Property 2: Sections are immutable values

    For any text, two sections of the same type and payload SHALL be equal,
    and the payload SHALL NOT be assignable after construction.
    """
    section = section_type(text)

    assert section == section_type(text)
    assert section.text == text
    with pytest.raises(dataclasses.FrozenInstanceError):
        section.text = "changed"


@settings(max_examples=100)
@given(text=st.text(max_size=50))
def test_different_kinds_with_same_text_are_not_equal(text: str):
    """Sections of different kinds never compare equal."""
    assert Goal(text) != Output(text)
    assert Step(text) != Role(text)


# **Feature: prompt-sections, Property 3: to_dict carries kind and payload**
@settings(max_examples=100)
@given(user=st.text(max_size=50), assistant=st.text(max_size=50))
def test_example_to_dict(user: str, assistant: str):
    """
    Property 3: to_dict carries kind and payload

    An Example SHALL serialize to its kind plus both payload fields.
    """
    assert Example(user, assistant).to_dict() == {
        "kind": "example",
        "user": user,
        "assistant": assistant,
    }


@pytest.mark.parametrize("section_type", TEXT_SECTION_TYPES)
def test_text_section_to_dict(section_type):
    """Text sections serialize to their kind and text."""
    assert section_type("payload").to_dict() == {
        "kind": section_type.kind,
        "text": "payload",
    }


def test_all_sections_derive_from_prompt_section():
    """Every registered section type is a PromptSection."""
    for kind, section_type in SECTION_TYPES.items():
        assert issubclass(section_type, PromptSection)
        assert section_type.kind == kind


def test_empty_text_is_accepted():
    """Empty payloads are accepted without validation."""
    assert Goal("").text == ""
    assert Example("", "").assistant == ""
