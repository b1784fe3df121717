"""
Tests for the response-type classifier.
Run with: pytest test_classifier.py -v
"""

import pytest

from classifier import (
    CHART_PATTERNS,
    FOOD_PATTERNS,
    QUESTION_PATTERNS,
    ResponseType,
    classify,
)


# ── Scenarios ───────────────────────────────────────────────

@pytest.mark.parametrize(
    "message, expected",
    [
        ("I had 2 eggs and toast for breakfast", ResponseType.FOOD_ANALYSIS),
        ("What should I eat for dinner tonight?", ResponseType.FOOD_ANALYSIS),
        ("Show me my weekly calorie progress", ResponseType.FOOD_ANALYSIS),
        ("Is intermittent fasting good for me?", ResponseType.ADVICE),
        ("Hello there!", ResponseType.GENERAL),
    ],
)
def test_scenarios(message, expected):
    assert classify(message) == expected


# ── Priority ────────────────────────────────────────────────

def test_food_beats_chart_and_question():
    assert classify("Help me track the protein I consumed") == ResponseType.FOOD_ANALYSIS


def test_chart_beats_question():
    assert classify("Can you recommend a daily step target?") == ResponseType.CHART_DATA


def test_question_without_food_or_chart():
    assert classify("How much sleep do I need?") == ResponseType.ADVICE


def test_every_food_pattern_matches():
    for pattern in FOOD_PATTERNS:
        assert classify(f"x {pattern} y") == ResponseType.FOOD_ANALYSIS


def test_chart_patterns_without_food_words():
    for pattern in CHART_PATTERNS:
        assert classify(pattern) == ResponseType.CHART_DATA


def test_question_patterns_without_food_or_chart_words():
    for pattern in QUESTION_PATTERNS:
        assert classify(pattern) == ResponseType.ADVICE


# ── Matching rules ──────────────────────────────────────────

def test_case_insensitive():
    assert classify("I ATE an apple") == classify("i ate an apple") == ResponseType.FOOD_ANALYSIS


def test_substring_match_inside_words():
    # "ate" inside "water" is enough to count as food logging.
    assert classify("How much water?") == ResponseType.FOOD_ANALYSIS


def test_calories_plural_matches():
    assert classify("Count my CALORIES") == ResponseType.FOOD_ANALYSIS


def test_no_keywords_is_general():
    assert classify("Tell me a joke") == ResponseType.GENERAL


def test_values_are_wire_strings():
    assert [t.value for t in ResponseType] == ["food_analysis", "chart_data", "advice", "general"]
