"""
Unit tests for localized stop-criterion messages.
"""

import pytest

from src.messages import STRINGS, get_string


def test_english_messages():
    assert get_string("leveloutofbounds", level=12, lang="en") == (
        "Requested level 12 out of bounds for the attempt"
    )
    assert get_string("maxquestattempted", lang="en") == "Maximum number of questions attempted"
    assert get_string("errorattemptstate", lang="en") == (
        "There was an error with the state of the attempt"
    )
    assert get_string("errorfetchingquest", level=4, lang="en") == (
        "Unable to fetch a question for level 4"
    )


def test_german_messages_carry_level():
    assert "7" in get_string("errorfetchingquest", level=7, lang="de")


def test_unknown_language_falls_back_to_english():
    assert get_string("maxquestattempted", lang="fr") == STRINGS["en"]["maxquestattempted"]


def test_unknown_identifier_raises():
    with pytest.raises(KeyError):
        get_string("nosuchstring", lang="en")


def test_languages_define_the_same_identifiers():
    assert set(STRINGS["de"]) == set(STRINGS["en"])
