import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# Load environment variables
load_dotenv()


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip()
    return value if value else default


class Config(BaseModel):
    """Configuration settings for the journal bot"""

    model_config = ConfigDict(frozen=True)

    # Telegram Bot Configuration
    telegram_bot_token: Optional[str] = None

    # OpenRouter AI Configuration
    openrouter_api_key: Optional[str] = None
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    ai_model: str = "meta-llama/llama-3-8b-instruct"
    ai_temperature: float = 0.7
    ai_max_tokens: int = 800
    ai_timeout: float = 60.0
    site_url: str = "http://localhost"
    site_name: str = "AI Therapy Assistant"
    history_window: int = 10  # Number of previous messages sent to the model

    # Geolocation
    geolocation_url: str = "https://ipinfo.io/json"
    geolocation_timeout: float = 5.0
    default_country_code: str = "US"

    # MongoDB Configuration
    mongodb_uri: str = "mongodb://localhost:27017/"
    database_name: str = "journal_bot"
    client_state_collection: str = "client_state"

    # Resource cards
    resource_warmup_turns: int = 3
    resource_interval: int = 6

    # Typing delay (seconds)
    typing_delay_min: float = 1.0
    typing_delay_max: float = 3.0
    typing_words_per_minute: int = 200

    # Logging
    log_level: str = "INFO"
    log_file: str = "logs/bot.log"

    # Seed for resource/key-phrase randomness, None means unseeded
    random_seed: Optional[int] = None

    @classmethod
    def from_env(cls) -> "Config":
        """Build the configuration once from the process environment"""
        seed = _getenv("RANDOM_SEED")

        return cls(
            telegram_bot_token=_getenv("TELEGRAM_BOT_TOKEN"),
            openrouter_api_key=_getenv("OPENROUTER_API_KEY"),
            ai_model=_getenv("AI_MODEL", cls.model_fields["ai_model"].default),
            site_url=_getenv("SITE_URL", cls.model_fields["site_url"].default),
            site_name=_getenv("SITE_NAME", cls.model_fields["site_name"].default),
            geolocation_url=_getenv("GEOLOCATION_URL", cls.model_fields["geolocation_url"].default),
            default_country_code=_getenv("DEFAULT_COUNTRY_CODE", "US").upper(),
            mongodb_uri=_getenv("MONGODB_URI", cls.model_fields["mongodb_uri"].default),
            database_name=_getenv("DATABASE_NAME", cls.model_fields["database_name"].default),
            log_level=_getenv("LOG_LEVEL", "INFO"),
            log_file=_getenv("LOG_FILE", cls.model_fields["log_file"].default),
            random_seed=int(seed) if seed is not None else None,
        )

    def check_required(self) -> bool:
        """Validate required configuration"""
        required_vars = {
            'TELEGRAM_BOT_TOKEN': self.telegram_bot_token,
            'MONGODB_URI': self.mongodb_uri,
        }

        missing_vars = [name for name, value in required_vars.items() if not value]

        if missing_vars:
            raise ValueError(f"Missing required environment variables: {', '.join(missing_vars)}")

        return True
