"""Unit tests for main application module."""

from pathlib import Path

import pytest

from dexter_console.core import CounterIdGenerator
from dexter_console.core.session import MASK_CHAR
from dexter_console.main import (
    CommandError,
    ConsoleRunner,
    create_console,
    create_session,
    parse_assignments,
)
from dexter_console.models import Message, ViewMode
from dexter_console.utils.config import AppConfig, ConsoleConfig, reset_config
from dexter_console.utils.exceptions import (
    ConfigurationError,
    EntityNotFoundError,
    SeedLoadError,
)


class ShoutingResponder:
    def respond(self, message: Message) -> str:
        return message.content.upper()


@pytest.fixture
def output() -> list[str]:
    """Captured console output."""
    return []


@pytest.fixture
def runner(session, output) -> ConsoleRunner:
    """ConsoleRunner writing into the captured output."""
    return ConsoleRunner(session, write=output.append)


class TestCreateSession:
    """Tests for create_session function."""

    def test_default_session(self):
        session = create_session(AppConfig())

        assert session.message_count == 1
        assert len(session.providers) == 5
        assert len(session.agent_cards) == 2
        assert session.active_view == ViewMode.CONVERSATION

    def test_configured_acknowledgment(self):
        config = AppConfig(console=ConsoleConfig(acknowledgment="On it."))
        session = create_session(config)

        _, agent_message = session.send_message("hi")

        assert agent_message.content == "On it."

    def test_counter_strategy(self):
        config = AppConfig(console=ConsoleConfig(id_strategy="counter", id_prefix="x"))
        session = create_session(config)

        user_message, agent_message = session.send_message("hi")
        card = session.add_agent_card()

        assert [user_message.id, agent_message.id, card.id] == ["x-1", "x-2", "x-3"]

    def test_injected_dependencies(self):
        session = create_session(
            AppConfig(),
            id_generator=CounterIdGenerator("t"),
            responder=ShoutingResponder(),
        )

        _, agent_message = session.send_message("quiet")

        assert agent_message.id == "t-2"
        assert agent_message.content == "QUIET"

    def test_strict_ids_from_config(self):
        session = create_session(AppConfig(console=ConsoleConfig(strict_ids=True)))

        with pytest.raises(EntityNotFoundError):
            session.update_provider("ghost", {"enabled": True})

    def test_seed_file(self, tmp_path: Path):
        seed_path = tmp_path / "seed.yaml"
        seed_path.write_text("agent_cards: []\n")
        config = AppConfig(console=ConsoleConfig(seed_file=str(seed_path)))

        session = create_session(config)

        assert len(session.agent_cards) == 0
        assert len(session.providers) == 5

    def test_missing_seed_file(self, tmp_path: Path):
        config = AppConfig(console=ConsoleConfig(seed_file=str(tmp_path / "nope.yaml")))

        with pytest.raises(SeedLoadError):
            create_session(config)

    def test_seeded_message_ids_not_reused(self, tmp_path: Path):
        seed_path = tmp_path / "seed.yaml"
        seed_path.write_text(
            "messages:\n"
            "  - id: id-1\n"
            "    role: agent\n"
            "    content: Restored greeting.\n"
        )
        config = AppConfig(
            console=ConsoleConfig(seed_file=str(seed_path), id_strategy="counter")
        )
        session = create_session(config)

        session.send_message("question")

        ids = [message.id for message in session.messages]
        assert session.message_count == 3
        assert len(set(ids)) == 3


class TestCreateConsole:
    """Tests for create_console function."""

    def teardown_method(self):
        reset_config()

    def test_create_console_with_config(self, tmp_path: Path):
        config_file = tmp_path / "test_config.yaml"
        config_file.write_text(
            """
app:
  env: testing
logging:
  level: DEBUG
  format: console
console:
  id_strategy: counter
  id_prefix: test
"""
        )

        session = create_console(config_path=config_file)

        user_message, _ = session.send_message("hi")
        assert user_message.id == "test-1"

    def test_invalid_config_value(self, tmp_path: Path):
        """Bad values surface as the error the entry script reports."""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("console:\n  id_strategy: random\n")

        with pytest.raises(ConfigurationError):
            create_console(config_path=config_file)


class TestParseAssignments:
    """Tests for parse_assignments."""

    def test_pairs(self):
        assert parse_assignments(["enabled=false", "name=Open AI"]) == {
            "enabled": "false",
            "name": "Open AI",
        }

    def test_value_may_contain_equals(self):
        assert parse_assignments(["api_key=a=b"]) == {"api_key": "a=b"}

    def test_empty_value(self):
        assert parse_assignments(["skills="]) == {"skills": ""}

    @pytest.mark.parametrize("token", ["enabled", "=x"])
    def test_malformed(self, token):
        with pytest.raises(CommandError):
            parse_assignments([token])


class TestConsoleRunner:
    """Tests for ConsoleRunner."""

    def test_render_conversation(self, runner):
        text = runner.render()

        assert "Research Console" in text
        assert "[Dexter] Welcome to Dexter Web." in text
        assert text.endswith("-- 1 messages --")

    def test_plain_line_sends_message(self, runner, session, output):
        assert runner.handle("What is AAPL's P/E?") is True

        assert session.message_count == 3
        assert "[You] What is AAPL's P/E?" in output[-1]
        assert output[-1].endswith("-- 3 messages --")

    def test_blank_line_is_ignored(self, runner, session, output):
        runner.handle("   ")

        assert session.message_count == 1
        assert output == []

    def test_switch_views(self, runner, session, output):
        runner.handle("/admin")
        assert session.active_view == ViewMode.ADMIN
        assert "Admin Control Center" in output[-1]
        assert "(Show keys: /keys)" in output[-1]

        runner.handle("/chat")
        assert session.active_view == ViewMode.CONVERSATION

    def test_keys_toggle(self, runner, session, output):
        session.update_provider("openai", {"api_key": "sk-test"})
        session.set_active_view(ViewMode.ADMIN)

        assert f"key={MASK_CHAR * 8}" in runner.render()

        runner.handle("/keys")
        assert session.show_keys is True
        assert "key=sk-test" in output[-1]
        assert "(Hide keys: /keys)" in output[-1]

    def test_provider_command(self, runner, session):
        runner.handle('/provider openai enabled=false "name=Open AI"')

        openai = session.providers.get("openai")
        assert openai.enabled is False
        assert openai.name == "Open AI"

    def test_card_command(self, runner, session):
        runner.handle("/card a2a-2 enabled=true")
        assert session.agent_cards.get("a2a-2").enabled is True

    def test_add_card_command(self, runner, session, output):
        runner.handle("/add-card")

        assert len(session.agent_cards) == 3
        assert output[-1] == f"Added agent card {session.agent_card_list[-1].id}"

    def test_invalid_field_reports_error(self, runner, session, output):
        assert runner.handle("/provider openai region=eu") is True
        assert output[-1].startswith("Error: Invalid value for region")

    def test_usage_error(self, runner, output):
        runner.handle("/provider openai")
        assert output[-1].startswith("Error: Usage: /provider")

    def test_unknown_command(self, runner, output):
        runner.handle("/delete a2a-1")
        assert output[-1] == "Error: Unknown command: /delete"

    def test_unbalanced_quotes(self, runner, output):
        runner.handle('/card a2a-1 "name=Open')
        assert output[-1].startswith("Error: Cannot parse command")

    def test_help(self, runner, output):
        runner.handle("/help")
        assert "/add-card" in output[-1]

    def test_quit(self, runner):
        assert runner.handle("/quit") is False

    def test_run_stops_at_quit(self, runner, session, output):
        runner.run(["first question\n", "/quit\n", "never sent\n"])

        assert session.message_count == 3
        assert session.messages[1].content == "first question"
