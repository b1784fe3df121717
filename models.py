"""NutriBot API — request/response models."""

from typing import Any, List, Optional

from pydantic import BaseModel, field_validator

from classifier import ResponseType


class ChatRequest(BaseModel):
    # Optional so a missing message gets the friendly 400 instead of a 422.
    message: Optional[str] = None
    userName: Optional[str] = None

    @field_validator("userName", mode="before")
    @classmethod
    def echo_any_user_name(cls, value: Any) -> Optional[str]:
        # The name is only echoed back, so any JSON scalar is accepted as text.
        if value is None or isinstance(value, str):
            return value
        return str(value)


class ChatResponse(BaseModel):
    response: str
    responseType: ResponseType
    timestamp: str
    userName: Optional[str] = None


class NutritionFactsResponse(BaseModel):
    food: str
    quantity: str
    nutritionInfo: str
    timestamp: str


class MealParameters(BaseModel):
    goal: Optional[str] = None
    cuisine: Optional[str] = None
    calories: Optional[str] = None


class MealSuggestionsResponse(BaseModel):
    suggestions: str
    parameters: MealParameters
    timestamp: str


class HealthResponse(BaseModel):
    status: str
    message: str
    model: str
    features: List[str]
