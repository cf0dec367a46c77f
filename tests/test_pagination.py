"""
Property-based tests for resumable page tokens.

Feature: dockerhub-sync
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from dockerhub_sync.exceptions import PageTokenError
from dockerhub_sync.pagination import Bag, PageState, page_number, parse_page_token
from dockerhub_sync.types.resources import ResourceId

TEAMS_OF_ACME = ResourceId(resource_type="team", resource="acme")

resource_name_strategy = st.text(
    alphabet=st.characters(whitelist_categories=("Lu", "Ll", "Nd"), whitelist_characters="-_"),
    min_size=1,
    max_size=30,
)


def test_empty_token_starts_at_first_page() -> None:
    bag, page = parse_page_token("", TEAMS_OF_ACME)

    assert page == 0
    assert bag.current() == PageState(resource_type_id="team", resource_id="acme")


@given(page=st.integers(min_value=1, max_value=10**6), resource=resource_name_strategy)
@settings(max_examples=100)
def test_property_token_resumes_at_next_page(page: int, resource: str) -> None:
    """
    Property: A token resumes where the previous page left off

    For any next page marker handed back by the API, the serialized token
    SHALL decode to the same page for the same enumeration.
    """
    position = ResourceId(resource_type="repository", resource=resource)
    bag, _ = parse_page_token("", position)

    token = bag.next_token(str(page))
    _, resumed = parse_page_token(token, position)

    assert token
    assert resumed == page


def test_exhausted_enumeration_returns_empty_token() -> None:
    bag, _ = parse_page_token("", TEAMS_OF_ACME)

    assert bag.next_token("") == ""


def test_token_is_deterministic() -> None:
    first, _ = parse_page_token("", TEAMS_OF_ACME)
    second, _ = parse_page_token("", TEAMS_OF_ACME)

    assert first.next_token("2") == second.next_token("2")


@pytest.mark.parametrize(
    "token",
    [
        "not-json",
        "[]",
        '"a string"',
        '{"states": 5}',
        '{"states": [1]}',
        '{"current_state": {"token": "2"}}',
        '{"current_state": {"resource_type_id": "team", "resource_id": 3}}',
        '{"states": [{"resource_type_id": "org"}]}',
    ],
)
def test_malformed_token_rejected(token: str) -> None:
    with pytest.raises(PageTokenError) as exc_info:
        parse_page_token(token, TEAMS_OF_ACME)

    assert exc_info.value.code == "INVALID_PAGE_TOKEN"


@pytest.mark.parametrize("marker", ["two", "-1", "1.5"])
def test_bad_page_marker_rejected(marker: str) -> None:
    bag, _ = parse_page_token("", TEAMS_OF_ACME)
    token = bag.next_token(marker)

    with pytest.raises(PageTokenError):
        parse_page_token(token, TEAMS_OF_ACME)


def test_token_for_other_resource_type_rejected() -> None:
    bag, _ = parse_page_token("", TEAMS_OF_ACME)
    token = bag.next_token("2")

    with pytest.raises(PageTokenError):
        parse_page_token(token, ResourceId(resource_type="repository", resource="acme"))


def test_token_for_other_parent_rejected() -> None:
    bag, _ = parse_page_token("", TEAMS_OF_ACME)
    token = bag.next_token("2")

    with pytest.raises(PageTokenError):
        parse_page_token(token, ResourceId(resource_type="team", resource="globex"))


def test_page_number() -> None:
    assert page_number("") == 0
    assert page_number("0") == 0
    assert page_number("17") == 17


def test_nested_enumerations_pop_to_parent() -> None:
    bag = Bag()
    bag.push(PageState(resource_type_id="team", resource_id="acme", token="3"))
    bag.push(PageState(resource_type_id="user", resource_id="7", token="2"))

    restored = Bag.unmarshal(bag.marshal())
    assert restored.current() == PageState(resource_type_id="user", resource_id="7", token="2")

    # Inner enumeration done: the outer one is current again
    token = restored.next_token("")
    outer = Bag.unmarshal(token)
    assert outer.current() == PageState(resource_type_id="team", resource_id="acme", token="3")
    assert outer.next_token("") == ""


def test_advancing_without_enumeration_rejected() -> None:
    with pytest.raises(PageTokenError):
        Bag().next("2")


def test_unmarshal_empty_token_is_empty_bag() -> None:
    bag = Bag.unmarshal("")

    assert bag.current() is None
    assert bag.page_token() == ""
    assert bag.marshal() == ""
