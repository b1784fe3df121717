"""
NutriBot API
Handles: nutrition chat, nutrition facts lookups, meal suggestions
Port: 7000 (PORT env var)

No database and no sessions: every request goes to the completion service
and comes back with a response type the frontend can use for formatting.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from classifier import classify
from config import get_settings
from dependencies import get_gateway
from exceptions import (
    ApiException,
    ChatFailedException,
    EmptyMessageException,
    MealSuggestionsException,
    NutritionFactsException,
)
from models import (
    ChatRequest,
    ChatResponse,
    HealthResponse,
    MealParameters,
    MealSuggestionsResponse,
    NutritionFactsResponse,
)
from openai_client import CompletionGateway
from prompts import meal_suggestions_query, nutrition_facts_query

# ── Config ────────────────────────────────────────────────────────────────────
settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("nutribot")

FEATURES = [
    "nutrition_analysis",
    "calorie_counting",
    "meal_planning",
    "diet_advice",
]

AVAILABLE_ENDPOINTS = [
    "POST /api/chat",
    "GET /api/nutrition-facts/:food",
    "GET /api/meal-suggestions",
    "GET /health",
]


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ── App ───────────────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("NutriBot API running on port %s", settings.port)
    logger.info("Using %s for food analysis", settings.openai_model)
    logger.info("No database - pure AI-powered nutrition advice")
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set; chat will answer with the fallback reply")
    yield


app = FastAPI(title="NutriBot API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Endpoints ─────────────────────────────────────────────────────────────────

@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="OK",
        message="NutriBot API is running!",
        model=settings.openai_model,
        features=FEATURES,
    )


@app.post("/api/chat", response_model=ChatResponse)
async def chat(request: ChatRequest, gateway: CompletionGateway = Depends(get_gateway)):
    """Main chat endpoint. The reply and the response type are computed independently."""
    if not request.message or not request.message.strip():
        raise EmptyMessageException()

    try:
        reply = await gateway.generate_reply(request.message, request.userName)
        response_type = classify(request.message)
    except Exception as e:
        logger.exception("Chat error")
        raise ChatFailedException() from e

    return ChatResponse(
        response=reply,
        responseType=response_type,
        timestamp=utc_timestamp(),
        userName=request.userName or None,
    )


@app.get("/api/nutrition-facts/{food}", response_model=NutritionFactsResponse)
async def nutrition_facts(
    food: str,
    quantity: Optional[str] = None,
    gateway: CompletionGateway = Depends(get_gateway),
):
    quantity = quantity or "100g"
    try:
        info = await gateway.generate_reply(nutrition_facts_query(food, quantity))
    except Exception as e:
        logger.exception("Nutrition facts error")
        raise NutritionFactsException() from e

    return NutritionFactsResponse(
        food=food,
        quantity=quantity,
        nutritionInfo=info,
        timestamp=utc_timestamp(),
    )


@app.get("/api/meal-suggestions", response_model=MealSuggestionsResponse)
async def meal_suggestions(
    goal: Optional[str] = None,
    cuisine: Optional[str] = None,
    calories: Optional[str] = None,
    gateway: CompletionGateway = Depends(get_gateway),
):
    try:
        suggestions = await gateway.generate_reply(meal_suggestions_query(goal, cuisine, calories))
    except Exception as e:
        logger.exception("Meal suggestions error")
        raise MealSuggestionsException() from e

    return MealSuggestionsResponse(
        suggestions=suggestions,
        parameters=MealParameters(goal=goal, cuisine=cuisine, calories=calories),
        timestamp=utc_timestamp(),
    )


# ── Error handlers ────────────────────────────────────────────────────────────

@app.exception_handler(ApiException)
async def api_exception(request: Request, exc: ApiException):
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    # A chat body that is not a JSON object with a string message counts as empty.
    if request.url.path == "/api/chat" and any(_is_message_error(error) for error in exc.errors()):
        logger.info("Rejected chat request: %s", exc.errors())
        return await api_exception(request, EmptyMessageException())
    return await request_validation_exception_handler(request, exc)


def _is_message_error(error: dict) -> bool:
    loc = tuple(error.get("loc", ()))
    if loc[:1] != ("body",):
        return False
    return len(loc) == 1 or loc[1] == "message" or error.get("type") == "json_invalid"


# Express-style: a known path with the wrong method is just another unknown endpoint.
@app.exception_handler(404)
@app.exception_handler(405)
async def not_found(request: Request, exc: Exception):
    return JSONResponse(
        status_code=404,
        content={
            "error": "Endpoint not found",
            "message": "Use /api/chat for nutrition conversations!",
            "availableEndpoints": AVAILABLE_ENDPOINTS,
        },
    )


@app.exception_handler(500)
async def server_error(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Something went wrong!",
            "response": "Our nutritionist is taking a quick break! Try again in a moment! 😊",
        },
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=settings.port)
