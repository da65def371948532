import logging
from typing import Generator, List

from ..config import Config
from .exceptions import MistralError
from .models import ChatMessage

logger = logging.getLogger(__name__)

# Nested command tree, also used for tab completion
COMMANDS = {
    "/new": None,
    "/help": None,
    "/model": {model: None for model in Config.MODEL_LIST},
    "/system": None,
    "/temperature": None,
    "/config": None,
    "/quit": None,
    "/exit": None,
}

EXIT_COMMANDS = ("/exit", "/quit")


def get_command(user_input: str) -> str:
    parts = user_input.split()
    return parts[0].strip() if parts else ""


def get_arguments(user_input: str) -> str:
    return " ".join(user_input.split()[1:])


def is_command(user_input: str) -> bool:
    return get_command(user_input) in COMMANDS


class ChatBot:
    """Keeps one conversation with the chat endpoint"""

    def __init__(
        self,
        client,
        model: str = Config.DEFAULT_MODEL,
        system_message: str = None,
        temperature: float = Config.DEFAULT_TEMPERATURE,
    ):
        self.client = client
        self.model = model
        self.system_message = system_message
        self.temperature = temperature
        self.messages: List[ChatMessage] = []
        self.new_chat()

    def new_chat(self):
        self.messages = []
        if self.system_message:
            self.messages.append(ChatMessage(role="system", content=self.system_message))

    def switch_model(self, model: str):
        if model not in Config.MODEL_LIST:
            raise ValueError(f"Invalid model name: {model}")
        self.model = model
        logger.info("Switching model: %s", model)

    def switch_system_message(self, system_message: str):
        if not system_message:
            raise ValueError("Invalid system message: a message is required")
        self.system_message = system_message
        logger.info("Switching system message: %s", system_message)
        self.new_chat()

    def switch_temperature(self, temperature: str):
        try:
            value = float(temperature)
        except ValueError:
            raise ValueError(f"Invalid temperature: {temperature}") from None
        if value < 0 or value > 1:
            raise ValueError(f"Invalid temperature: {temperature}")
        self.temperature = value
        logger.info("Switching temperature: %s", value)

    def describe_config(self) -> str:
        return (
            f"Current model: {self.model}\n"
            f"Current temperature: {self.temperature}\n"
            f"Current system message: {self.system_message}"
        )

    def execute_command(self, user_input: str) -> str:
        """Run a non-exit slash command and return the text to show."""
        command = get_command(user_input)
        arguments = get_arguments(user_input)

        if command == "/new":
            self.new_chat()
            return f"Starting new chat with model: {self.model}, temperature: {self.temperature}"
        if command == "/model":
            self.switch_model(arguments)
            return f"Switched model to {self.model}"
        if command == "/system":
            self.switch_system_message(arguments)
            return f"Switched system message to: {self.system_message}"
        if command == "/temperature":
            self.switch_temperature(arguments)
            return f"Switched temperature to {self.temperature}"
        if command == "/config":
            return self.describe_config()
        raise ValueError(f"Unknown command: {command}")

    def chat(self, content: str) -> Generator[str, None, None]:
        """Send a user message and yield the assistant reply as it streams."""
        user_message = ChatMessage(role="user", content=content)
        self.messages.append(user_message)
        logger.debug("Running inference with model: %s, temperature: %s", self.model, self.temperature)

        full_content = ""
        try:
            with self.client.chat_stream(
                model=self.model,
                temperature=self.temperature,
                messages=self.messages,
            ) as stream:
                for chunk in stream:
                    if not chunk.choices:
                        continue
                    token = chunk.choices[0].delta.content
                    if token:
                        full_content += token
                        yield token
        except MistralError:
            # unanswered turns never stay in the history
            if self.messages and self.messages[-1] is user_message:
                self.messages.pop()
            raise

        if full_content:
            self.messages.append(ChatMessage(role="assistant", content=full_content))
