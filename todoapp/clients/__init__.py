from .joke_client import JokeApiError, JokeClient

__all__ = ["JokeApiError", "JokeClient"]
