from __future__ import annotations

from sentimentai.env import get_bool_env, get_env, get_float_env, get_int_env


def test_blank_values_fall_back_to_default(monkeypatch) -> None:
    monkeypatch.setenv("SENTIMENT_TEST_VALUE", "   ")

    assert get_env("SENTIMENT_TEST_VALUE", "fallback") == "fallback"
    assert get_int_env("SENTIMENT_TEST_VALUE", 4) == 4


def test_numbers_are_parsed_or_defaulted(monkeypatch) -> None:
    monkeypatch.setenv("SENTIMENT_TEST_INT", " 12 ")
    monkeypatch.setenv("SENTIMENT_TEST_FLOAT", "0.25")
    monkeypatch.setenv("SENTIMENT_TEST_BAD", "twelve")

    assert get_int_env("SENTIMENT_TEST_INT", 0) == 12
    assert get_float_env("SENTIMENT_TEST_FLOAT", 1.0) == 0.25
    assert get_float_env("SENTIMENT_TEST_BAD", 1.0) == 1.0


def test_bool_words(monkeypatch) -> None:
    monkeypatch.setenv("SENTIMENT_TEST_ON", "Yes")
    monkeypatch.setenv("SENTIMENT_TEST_OFF", "off")
    monkeypatch.setenv("SENTIMENT_TEST_ODD", "perhaps")
    monkeypatch.delenv("SENTIMENT_TEST_MISSING", raising=False)

    assert get_bool_env("SENTIMENT_TEST_ON", False) is True
    assert get_bool_env("SENTIMENT_TEST_OFF", True) is False
    assert get_bool_env("SENTIMENT_TEST_ODD", True) is True
    assert get_bool_env("SENTIMENT_TEST_MISSING", False) is False
