"""Bot strategies for the cribbage engine."""

from .base import BotStrategy
from .exhaustive_bot import ExhaustiveBot
from .factory import BOT_REGISTRY, create_bot
from .random_bot import RandomBot
from .sampling_bot import SamplingBot

__all__ = ["BotStrategy", "RandomBot", "SamplingBot", "ExhaustiveBot", "BOT_REGISTRY", "create_bot"]
