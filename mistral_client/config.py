import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .core.exceptions import ConfigurationError


class Config:
    """Process-wide settings and environment lookups."""

    ENDPOINT = "https://api.mistral.ai"
    API_KEY_ENV = "MISTRAL_API_KEY"
    LOG_LEVEL_ENV = "MISTRAL_LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "ERROR"

    DEFAULT_MAX_RETRIES = 5
    DEFAULT_TIMEOUT = 120

    # Managed inference deployments serve a single model under a fixed name
    MANAGED_ENDPOINT_MARKER = "inference.azure.com"
    MANAGED_DEFAULT_MODEL = "mistral"

    # Chatbot
    MODEL_LIST = [
        "mistral-tiny-latest",
        "mistral-small-latest",
        "mistral-medium-latest",
        "mistral-large-latest",
        "codestral-latest",
    ]
    DEFAULT_MODEL = "mistral-small-latest"
    DEFAULT_TEMPERATURE = 0.7
    HISTORY_FILE = ".mistral_history"
    CODE_THEME = "monokai"

    @staticmethod
    def load_env(path: str = None) -> bool:
        """Load variables from a .env file without overriding the environment."""
        return load_dotenv(dotenv_path=path, override=False)

    @staticmethod
    def get_api_key(api_key: str = None) -> str:
        if api_key is None:
            api_key = os.environ.get(Config.API_KEY_ENV)
        if not api_key:
            raise ConfigurationError(
                f"API key not provided. Please set {Config.API_KEY_ENV} environment variable."
            )
        return api_key

    @staticmethod
    def get_log_level() -> str:
        return os.environ.get(Config.LOG_LEVEL_ENV, Config.DEFAULT_LOG_LEVEL).upper()

    @staticmethod
    def default_model_for(endpoint: str):
        """Return the model substituted when a call omits one, or None."""
        if Config.MANAGED_ENDPOINT_MARKER in endpoint:
            return Config.MANAGED_DEFAULT_MODEL
        return None

    @staticmethod
    def configure_logging(level: str = None) -> None:
        """Attach a rich handler to the package logger."""
        from rich.logging import RichHandler

        level = (level or Config.get_log_level()).upper()
        logger = logging.getLogger("mistral_client")
        for handler in list(logger.handlers):
            if isinstance(handler, RichHandler):
                logger.removeHandler(handler)
        logger.addHandler(RichHandler(rich_tracebacks=True, show_path=False))
        logger.setLevel(getattr(logging, level, logging.ERROR))


@dataclass(frozen=True)
class ClientConfig:
    """Immutable per-client settings shared by every call."""

    endpoint: str
    api_key: str
    max_retries: int = Config.DEFAULT_MAX_RETRIES
    timeout: float = Config.DEFAULT_TIMEOUT

    @classmethod
    def create(
        cls,
        api_key: str = None,
        endpoint: str = None,
        max_retries: int = None,
        timeout: float = None,
    ) -> "ClientConfig":
        if max_retries is not None and max_retries < 0:
            raise ConfigurationError("max_retries must be >= 0")
        return cls(
            endpoint=endpoint or Config.ENDPOINT,
            api_key=Config.get_api_key(api_key),
            max_retries=Config.DEFAULT_MAX_RETRIES if max_retries is None else max_retries,
            timeout=Config.DEFAULT_TIMEOUT if timeout is None else timeout,
        )

    @property
    def default_model(self):
        return Config.default_model_for(self.endpoint)
