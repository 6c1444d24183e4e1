import pytest

from kol_oracle.domain.matching import keywords_found, matching_keywords


def test_keywords_found_is_case_insensitive():
    assert keywords_found(["Big AIRDROP today!", "gm"], ["airdrop", "launch"]) is True
    assert keywords_found(["big airdrop today!"], ["AirDrop"]) is True


def test_keywords_found_returns_false_without_hits():
    assert keywords_found(["gm", "wagmi"], ["moon"]) is False


@pytest.mark.parametrize("keywords", [["moon"], ["a", "b"], [""]])
def test_empty_texts_never_match(keywords):
    assert keywords_found([], keywords) is False


def test_none_and_non_string_texts_are_ignored():
    texts = [None, 42, "launch day", {"tweet": "airdrop"}]
    assert keywords_found(texts, ["airdrop"]) is False
    assert keywords_found(texts, ["LAUNCH"]) is True


def test_keyword_order_does_not_change_result():
    texts = ["We go to the moon", "gm"]
    assert keywords_found(texts, ["moon", "sun"]) == keywords_found(texts, ["sun", "moon"])


def test_substring_inside_word_matches():
    assert keywords_found(["relaunching soon"], ["launch"]) is True


def test_empty_keyword_matches_any_text():
    assert keywords_found(["anything"], ["x", ""]) is True


def test_matching_keywords_keeps_keyword_order_and_dedupes():
    texts = ["Moon launch", "AIRDROP"]
    assert matching_keywords(texts, ["airdrop", "moon", "Moon", "moon", "sun"]) == ["airdrop", "moon", "Moon"]
