"""Interactive command-line interface for the todo assistant."""

import asyncio
import os
import sys
import uuid
from dataclasses import dataclass
from pathlib import Path

from .agent import AgentConfig, AgentLoop, Conversation, StopReason, build_system_prompt
from .agent.prompt import turn_error_message
from .agent.protocol import UserMessage, to_json
from .errors import StoreError, TransportError
from .llm import DEFAULT_MODEL, CompletionClient
from .logging import JSONLLogger, configure_logger, get_logger
from .todos import TodoStore, build_todo_registry

DEFAULT_DB_PATH = Path.home() / ".todo_assistant" / "todos.db"

CYAN = "\x1b[36m"
YELLOW = "\x1b[33m"
GREEN = "\x1b[32m"
BLUE = "\x1b[34m"
RED = "\x1b[31m"
BOLD = "\x1b[1m"
RESET = "\x1b[0m"
CLEAR_LINE = "\r\x1b[K"

BANNER = f"""
{CYAN}========================================{RESET}
{BOLD}{YELLOW}       AI TODO LIST ASSISTANT       {RESET}
{CYAN}========================================{RESET}
{GREEN}Type your requests (or 'exit' to quit):{RESET}
"""

PROMPT = f"{BOLD}{BLUE}You: {RESET}"


@dataclass
class Settings:
    """Runtime settings read from the environment."""

    model: str = DEFAULT_MODEL
    db_path: Path = DEFAULT_DB_PATH
    log_dir: Path | None = None
    max_rounds: int | None = None


def _parse_max_rounds(value: str | None) -> int | None:
    if not value:
        return None
    rounds = int(value)
    if rounds < 1:
        raise ValueError(f"TODO_MAX_ROUNDS must be at least 1, got {rounds}")
    return rounds


def _config_from_env() -> Settings:
    """Load configuration from environment variables."""
    max_rounds = os.getenv("TODO_MAX_ROUNDS")
    log_dir = os.getenv("TODO_LOG_DIR")
    return Settings(
        model=os.getenv("GROQ_MODEL", DEFAULT_MODEL),
        db_path=Path(os.getenv("TODO_DB_PATH", str(DEFAULT_DB_PATH))).expanduser(),
        log_dir=Path(log_dir).expanduser() if log_dir else None,
        max_rounds=_parse_max_rounds(max_rounds),
    )


def _print_transport_error(error: TransportError) -> None:
    print(f"{CLEAR_LINE}{RED}API error: {error}{RESET}", file=sys.stderr)


class CLI:
    """Interactive shell: read a line, run one turn, print the output."""

    def __init__(
        self,
        store: TodoStore,
        agent: AgentLoop,
        logger: JSONLLogger | None = None,
    ) -> None:
        self.store = store
        self.agent = agent
        self.logger = logger or get_logger()
        self.session_id = self._new_session_id()
        self.conversation = Conversation.start(build_system_prompt(agent.registry))

    def _new_session_id(self) -> str:
        """Generate a new session ID."""
        return f"cli-{uuid.uuid4().hex[:8]}"

    def _format_response(self, output: str, stop_reason: StopReason, rounds: int) -> str:
        """Format the assistant's output for display."""
        text = f"{BOLD}{GREEN}Assistant: {RESET}{output}"
        if stop_reason != StopReason.COMPLETE:
            text += f"\n{YELLOW}Stopped: {stop_reason.value} (rounds: {rounds}){RESET}"
        return text

    def _is_exit(self, user_input: str) -> bool:
        return user_input.strip().lower() == "exit"

    async def _process_message(self, message: str) -> None:
        """Append a user message and run one turn."""
        self.conversation.add_user(to_json(UserMessage(user=message)))
        self.logger.log("user_message", content=message)

        print(f"{YELLOW}Thinking...{RESET}", end="", flush=True)
        try:
            result = await self.agent.run_turn(self.conversation)
        except Exception as e:
            print(CLEAR_LINE, end="")
            print(f"{RED}Error: {e}{RESET}")
            self.logger.log("error", error=str(e))
            self.conversation.add_system(turn_error_message(e))
            return

        print(CLEAR_LINE, end="")
        print(self._format_response(result.output, result.stop_reason, result.rounds))

    async def run(self) -> None:
        """Run the interactive shell until exit."""
        print(BANNER)
        self.logger.session_id = self.session_id
        self.logger.log("session_start")

        try:
            while True:
                try:
                    user_input = input(PROMPT)
                except (EOFError, KeyboardInterrupt):
                    print(f"\n{GREEN}Goodbye!{RESET}")
                    break

                if self._is_exit(user_input):
                    print(f"\n{GREEN}Thank you for using the AI Todo Assistant. Goodbye!{RESET}")
                    break

                if not user_input.strip():
                    print(f"{YELLOW}Please enter a command or question.{RESET}")
                    continue

                try:
                    await self._process_message(user_input.strip())
                except (KeyboardInterrupt, asyncio.CancelledError):
                    print(f"{CLEAR_LINE}{GREEN}Interrupted. Goodbye!{RESET}")
                    self.logger.log("session_interrupt")
                    break
        finally:
            self.store.close()
            self.logger.log("session_end", messages=len(self.conversation))


def build_cli(settings: Settings, logger: JSONLLogger | None = None) -> CLI:
    """Open the store and wire the loop for the given settings.

    Raises:
        StoreError: If the database cannot be opened.
    """
    store = TodoStore(settings.db_path)
    store.init_db()

    agent = AgentLoop(
        build_todo_registry(store),
        CompletionClient(model=settings.model),
        config=AgentConfig(max_rounds=settings.max_rounds),
        logger=logger,
        on_transport_error=_print_transport_error,
    )
    return CLI(store, agent, logger=logger)


async def run_cli() -> int:
    """Run the CLI with configuration from the environment.

    Returns:
        Process exit code: 0 on clean exit, 1 if startup failed.
    """
    try:
        settings = _config_from_env()
    except ValueError as e:
        print(f"{RED}Error: invalid configuration: {e}{RESET}")
        return 1

    logger = configure_logger(settings.log_dir)

    if not os.getenv("GROQ_API_KEY"):
        print(f"{RED}Error: GROQ_API_KEY environment variable not set{RESET}")
        print("Please set it in your .env file or environment")
        return 1

    try:
        cli = build_cli(settings, logger=logger)
    except StoreError as e:
        print(f"{RED}Error: could not open the todo database: {e}{RESET}")
        logger.log("error", error=str(e))
        return 1

    await cli.run()
    return 0
