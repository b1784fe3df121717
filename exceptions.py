"""Error types and the friendly payloads the API returns for them."""


class CompletionError(Exception):
    """Raised inside the gateway when the completion service gives no usable reply."""


class ApiException(Exception):
    status_code = 500

    def __init__(self, error: str, **extra: str):
        super().__init__(error)
        self.error = error
        self.extra = extra

    def to_content(self) -> dict:
        return {"error": self.error, **self.extra}


class EmptyMessageException(ApiException):
    status_code = 400

    def __init__(self):
        super().__init__("Message is required", response="Hey! I need a message to help you out! 😊")


class ChatFailedException(ApiException):
    def __init__(self):
        super().__init__(
            "Something went wrong!",
            response="Oops! I'm having a tiny hiccup 😅 Let me try that again! Please resend your message.",
        )


class NutritionFactsException(ApiException):
    def __init__(self):
        super().__init__("Could not fetch nutrition facts", message="Try asking in the main chat instead!")


class MealSuggestionsException(ApiException):
    def __init__(self):
        super().__init__("Could not generate meal suggestions", message="Try asking for meal ideas in the main chat!")
