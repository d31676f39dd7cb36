"""Dexter Console - Main Application Entry Point.

This module builds a console session from configuration and drives it from a
line-oriented terminal loop.
"""

import shlex
from collections.abc import Callable, Iterable
from pathlib import Path

from dexter_console.core import (
    AgentCardRegistry,
    AgentResponder,
    ConversationStore,
    IdGenerator,
    PlaceholderResponder,
    ProviderRegistry,
    SessionView,
    create_id_generator,
    default_seed,
    load_seed_file,
)
from dexter_console.models import ViewMode
from dexter_console.utils.config import AppConfig, LogFormat, init_config
from dexter_console.utils.exceptions import ConsoleError
from dexter_console.utils.logging import (
    clear_correlation_id,
    get_logger,
    set_correlation_id,
    setup_logging,
)

logger = get_logger(__name__)

HELP_TEXT = """\
Commands:
  <text>                          send a message to the agent
  /chat | /admin                  switch view
  /keys                           show or hide provider api keys
  /provider <id> <field>=<value>  update a provider (name, base_url, api_key, enabled)
  /card <id> <field>=<value>      update an agent card
  /add-card                       add a new agent card
  /help                           show this help
  /quit                           leave the console"""


class CommandError(ConsoleError):
    """Raised when a console command cannot be parsed."""

    pass


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


def get_config_path() -> Path:
    """Get the path to the app.yaml configuration file."""
    return get_project_root() / "configs" / "app.yaml"


def create_session(
    config: AppConfig,
    id_generator: IdGenerator | None = None,
    responder: AgentResponder | None = None,
) -> SessionView:
    """Build a fresh session with seeded stores.

    Args:
        config: Application configuration.
        id_generator: Optional id source; defaults to the configured strategy.
        responder: Optional agent responder; defaults to the placeholder.

    Returns:
        The session coordinator wired to its three stores.
    """
    settings = config.console
    id_generator = id_generator or create_id_generator(
        settings.id_strategy, settings.id_prefix
    )

    if settings.seed_file:
        seed = load_seed_file(settings.seed_file, welcome=settings.welcome_message)
    else:
        seed = default_seed(settings.welcome_message)

    conversation = ConversationStore(
        id_generator,
        responder=responder or PlaceholderResponder(settings.acknowledgment),
        messages=seed.messages,
    )
    providers = ProviderRegistry(
        seed.providers,
        strict_ids=settings.strict_ids,
        validate_urls=settings.validate_urls,
    )
    agent_cards = AgentCardRegistry(
        id_generator,
        seed.agent_cards,
        strict_ids=settings.strict_ids,
        validate_urls=settings.validate_urls,
    )

    session = SessionView(
        conversation,
        providers,
        agent_cards,
        key_mask_length=settings.key_mask_length,
    )
    logger.info(
        "Session created",
        session_id=session.session_id,
        messages=len(conversation),
        providers=len(providers),
        agent_cards=len(agent_cards),
    )
    return session


def create_console(
    config_path: str | Path | None = None,
    env_file: str | Path | None = None,
) -> SessionView:
    """Load configuration, set up logging and build a session.

    Args:
        config_path: Optional path to YAML configuration file.
        env_file: Optional path to .env file.
    """
    if config_path is None:
        default_config_path = get_config_path()
        if default_config_path.exists():
            config_path = default_config_path

    config = init_config(yaml_path=config_path, env_file=env_file)

    setup_logging(
        level=config.logging.level,
        json_format=config.logging.format == LogFormat.JSON,
        log_file=config.logging.file,
    )

    logger.info(
        "Starting Dexter console",
        app_name=config.app.name,
        version=config.app.version,
        environment=config.app.env.value,
    )
    return create_session(config)


def parse_assignments(tokens: list[str]) -> dict[str, str]:
    """Parse ``field=value`` tokens into a patch mapping."""
    patch: dict[str, str] = {}
    for token in tokens:
        field, sep, value = token.partition("=")
        if not sep or not field:
            raise CommandError(f"Expected <field>=<value>, got {token!r}")
        patch[field] = value
    return patch


class ConsoleRunner:
    """Line-oriented driver for a ``SessionView``.

    Plain lines become messages; lines starting with ``/`` are commands.
    Output goes through ``write`` so tests can capture it.
    """

    def __init__(
        self, session: SessionView, write: Callable[[str], None] = print
    ) -> None:
        self.session = session
        self.write = write

    def render(self) -> str:
        """Render the active view as text."""
        if self.session.active_view == ViewMode.ADMIN:
            body = self._render_admin()
        else:
            body = self._render_conversation()
        return f"{body}\n-- {self.session.message_count} messages --"

    def _render_conversation(self) -> str:
        lines = ["== Research Console =="]
        for message in self.session.messages:
            lines.append(f"[{message.display_name}] {message.content}")
        return "\n".join(lines)

    def _render_admin(self) -> str:
        session = self.session
        toggle = "Hide keys" if session.show_keys else "Show keys"
        lines = [f"== Admin Control Center == ({toggle}: /keys)", "LLM Providers:"]
        for provider in session.provider_list:
            state = "enabled" if provider.enabled else "disabled"
            key = session.display_api_key(provider) or "-"
            lines.append(
                f"  {provider.id:<12} {provider.name:<16} {provider.base_url} "
                f"key={key} [{state}]"
            )
        lines.append("A2A Agent Cards:")
        for card in session.agent_card_list:
            state = "live" if card.enabled else "off"
            lines.append(
                f"  {card.id:<12} {card.name} ({card.primary_model}) "
                f"{card.contact} [{state}]"
            )
            if card.skills:
                lines.append(f"    skills: {', '.join(card.skill_list())}")
        return "\n".join(lines)

    def handle(self, line: str) -> bool:
        """Process one input line. Returns False when the user quits."""
        set_correlation_id()
        try:
            return self._dispatch(line)
        except ConsoleError as e:
            logger.warning("Command failed", error=e.__class__.__name__, **e.details)
            self.write(f"Error: {e.message}")
            return True
        finally:
            clear_correlation_id()

    def _dispatch(self, line: str) -> bool:
        session = self.session

        if not line.startswith("/"):
            session.set_draft(line)
            if session.send_message() is not None:
                self.write(self.render())
            return True

        try:
            command, *args = shlex.split(line)
        except ValueError as e:
            raise CommandError(f"Cannot parse command: {e}") from e

        if command == "/quit":
            return False
        if command == "/help":
            self.write(HELP_TEXT)
        elif command == "/chat":
            session.set_active_view(ViewMode.CONVERSATION)
            self.write(self.render())
        elif command == "/admin":
            session.set_active_view(ViewMode.ADMIN)
            self.write(self.render())
        elif command == "/keys":
            session.toggle_key_visibility()
            self.write(self.render())
        elif command in ("/provider", "/card"):
            if len(args) < 2:
                raise CommandError(f"Usage: {command} <id> <field>=<value> ...")
            entity_id, patch = args[0], parse_assignments(args[1:])
            if command == "/provider":
                session.update_provider(entity_id, patch)
            else:
                session.update_agent_card(entity_id, patch)
            self.write(self.render())
        elif command == "/add-card":
            card = session.add_agent_card()
            self.write(f"Added agent card {card.id}")
        else:
            raise CommandError(f"Unknown command: {command}")
        return True

    def run(self, lines: Iterable[str]) -> None:
        """Process lines until exhausted or ``/quit``."""
        self.write(self.render())
        for line in lines:
            if not self.handle(line.rstrip("\n")):
                break
