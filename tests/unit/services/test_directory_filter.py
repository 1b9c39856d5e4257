import pytest

from skillswap.schemas.directory import SortKey
from skillswap.schemas.profile import Skill, UserProfile
from skillswap.services.directory_filter import (
    apply_directory_pipeline,
    filter_by_location,
    filter_by_query,
    locale_sort_key,
    sort_profiles,
)


def _profile(name, location="Mumbai", offered=(), wanted=(), rating=0.0):
    return UserProfile(
        name=name,
        email=f"{name.lower()}@example.com",
        location=location,
        average_rating=rating,
        skills_offered=[Skill(name=s) for s in offered],
        skills_wanted=[Skill(name=s) for s in wanted],
    )


@pytest.fixture()
def asha_and_ravi():
    return [
        _profile("Asha", "Mumbai", offered=["Guitar"], rating=4.5),
        _profile("Ravi", "Pune", offered=["Coding"], rating=4.8),
    ]


def _names(profiles):
    return [p.name for p in profiles]


def test_query_matches_offered_skill_case_insensitively(asha_and_ravi):
    assert _names(filter_by_query(asha_and_ravi, "guitar")) == ["Asha"]


def test_rating_sort_on_unfiltered_list(asha_and_ravi):
    assert _names(apply_directory_pipeline(asha_and_ravi, sort=SortKey.RATING)) == ["Ravi", "Asha"]


def test_query_matches_name_and_wanted_skills():
    users = [
        _profile("Meera", wanted=["Salsa"]),
        _profile("Salman"),
        _profile("Kiran", offered=["Tabla"]),
    ]

    assert _names(filter_by_query(users, "SAL")) == ["Meera", "Salman"]


@pytest.mark.parametrize("blank", ["", "   ", "\t"])
def test_blank_filters_are_skipped(asha_and_ravi, blank):
    assert filter_by_query(asha_and_ravi, blank) == asha_and_ravi
    assert filter_by_location(asha_and_ravi, blank) == asha_and_ravi


def test_no_match_gives_empty_result(asha_and_ravi):
    assert apply_directory_pipeline(asha_and_ravi, query="violin") == []


def test_location_is_substring_match():
    users = [
        _profile("A", "Navi Mumbai"),
        _profile("B", "Pune"),
        _profile("C", "mumbai"),
    ]

    assert _names(filter_by_location(users, "Mumbai")) == ["A", "C"]


def test_query_then_location_then_sort():
    users = [
        _profile("Zoya", "Mumbai", offered=["Guitar"], rating=3.0),
        _profile("Arjun", "Pune", offered=["Guitar"], rating=5.0),
        _profile("Bela", "Mumbai", wanted=["guitar lessons"], rating=4.0),
        _profile("Dev", "Mumbai", offered=["Chess"], rating=4.9),
    ]

    result = apply_directory_pipeline(users, query="guitar", location="mum", sort=SortKey.NAME)

    assert _names(result) == ["Bela", "Zoya"]


def test_rating_sort_is_stable_and_idempotent():
    users = [
        _profile("First", rating=4.0),
        _profile("Top", rating=5.0),
        _profile("Second", rating=4.0),
        _profile("Unrated"),
        _profile("Third", rating=4.0),
    ]

    once = sort_profiles(users, SortKey.RATING)
    twice = sort_profiles(once, SortKey.RATING)

    assert _names(once) == ["Top", "First", "Second", "Third", "Unrated"]
    assert twice == once


def test_name_sort_ignores_case_and_accents():
    users = [_profile(n) for n in ["zara", "Émile", "aditi", "Bhavna", "emma"]]

    result = _names(sort_profiles(users, SortKey.NAME))

    assert result == ["aditi", "Bhavna", "Émile", "emma", "zara"]
    keys = [locale_sort_key(n) for n in result]
    assert keys == sorted(keys)


def test_name_sort_puts_lowercase_first_on_ties():
    users = [_profile(n) for n in ["Emma", "emma", "EMMA"]]

    assert _names(sort_profiles(users, SortKey.NAME)) == ["emma", "Emma", "EMMA"]


def test_pipeline_does_not_mutate_input():
    users = [_profile("B", rating=1.0), _profile("A", rating=2.0)]
    before = list(users)

    apply_directory_pipeline(users, query="a", location="mum", sort=SortKey.RATING)
    apply_directory_pipeline(users, sort=SortKey.NAME)

    assert users == before


def test_sort_key_accepts_plain_strings(asha_and_ravi):
    assert _names(apply_directory_pipeline(asha_and_ravi, sort="name")) == ["Asha", "Ravi"]


def test_query_is_matched_as_typed(asha_and_ravi):
    assert _names(filter_by_query(asha_and_ravi, " guitar")) == []
    assert _names(filter_by_query(asha_and_ravi, "uit")) == ["Asha"]
