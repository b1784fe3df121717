"""
Response-type classifier.

Labels a user message with the kind of nutrition intent it most likely
expresses, so the frontend can pick a rendering style. Categories are checked
in order and the first one with a matching keyword wins.
"""

from enum import Enum


class ResponseType(str, Enum):
    FOOD_ANALYSIS = "food_analysis"
    CHART_DATA = "chart_data"
    ADVICE = "advice"
    GENERAL = "general"


# Food logging patterns. Singular "calorie" so "weekly calorie progress" is
# food logging rather than chart data; it still covers "calories".
FOOD_PATTERNS = (
    "ate",
    "had",
    "consumed",
    "breakfast",
    "lunch",
    "dinner",
    "snack",
    "meal",
    "food",
    "calorie",
    "protein",
    "carbs",
    "fat",
    "nutrition",
)

# Chart-worthy patterns
CHART_PATTERNS = (
    "track",
    "progress",
    "compare",
    "daily",
    "weekly",
    "goal",
    "target",
)

# Question patterns
QUESTION_PATTERNS = (
    "what should i eat",
    "how much",
    "is it healthy",
    "good for",
    "bad for",
    "should i avoid",
    "can i eat",
    "help me",
    "advice",
    "suggest",
    "recommend",
)

# Priority order matters: food beats chart beats advice.
RULES = (
    (ResponseType.FOOD_ANALYSIS, FOOD_PATTERNS),
    (ResponseType.CHART_DATA, CHART_PATTERNS),
    (ResponseType.ADVICE, QUESTION_PATTERNS),
)


def classify(message: str) -> ResponseType:
    lower = message.lower()
    for response_type, patterns in RULES:
        if any(pattern in lower for pattern in patterns):
            return response_type
    return ResponseType.GENERAL
