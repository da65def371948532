"""Interactive streaming chatbot; run with -h to see the options."""

import argparse
import logging
import sys

from .config import Config
from .core.chatbot import EXIT_COMMANDS, ChatBot, get_command, is_command
from .core.client import MistralClient
from .core.exceptions import ConfigurationError, MistralError
from .ui.interface import UI

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mistral-chat", description="A simple chatbot using the Mistral API")
    parser.add_argument(
        "--api-key",
        default=None,
        help=f"Mistral API key. Defaults to environment variable {Config.API_KEY_ENV}",
    )
    parser.add_argument(
        "-m", "--model",
        choices=Config.MODEL_LIST,
        default=Config.DEFAULT_MODEL,
        help=f"Model for chat inference. Defaults to {Config.DEFAULT_MODEL}",
    )
    parser.add_argument("-s", "--system-message", default=None, help="Optional system message to prepend")
    parser.add_argument(
        "-t", "--temperature",
        type=float,
        default=Config.DEFAULT_TEMPERATURE,
        help=f"Optional temperature for chat inference. Defaults to {Config.DEFAULT_TEMPERATURE}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    return parser


def run(bot: ChatBot, ui: UI):
    ui.banner()
    ui.show_msg("Session", f"Model: {bot.model}, temperature: {bot.temperature}", "cyan")

    while True:
        user_input = ui.get_input().strip()
        if not user_input:
            continue

        command = get_command(user_input)
        if command in EXIT_COMMANDS:
            logger.debug("Exiting chatbot")
            ui.console.print("[bold green]Goodbye![/]")
            return
        if command == "/help":
            ui.help()
            continue
        if is_command(user_input):
            try:
                ui.show_msg("Config", bot.execute_command(user_input), "cyan")
            except ValueError as e:
                ui.show_msg("Error", str(e), "red")
            continue

        try:
            ui.stream_markdown("MISTRAL", bot.chat(user_input))
        except MistralError as e:
            logger.debug("Inference failed", exc_info=True)
            ui.show_msg("Error", str(e), "red")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    Config.load_env()
    Config.configure_logging("DEBUG" if args.debug else None)

    try:
        client = MistralClient(api_key=args.api_key)
    except ConfigurationError as e:
        print(f"[!] {e}", file=sys.stderr)
        return 1

    bot = ChatBot(client, model=args.model, system_message=args.system_message, temperature=args.temperature)
    try:
        run(bot, UI())
    except KeyboardInterrupt:
        pass
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
