from app.models.greeting import GREETING_MESSAGE, GreetingResponse

__all__ = ["GREETING_MESSAGE", "GreetingResponse"]
