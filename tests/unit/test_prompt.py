"""
Unit tests for prompt mode.

Tests command and coordinate parsing and the line-based game loop.
"""
import io

import pytest
from minesweeper import Command, GameSession
from minesweeper.game import LOSE_MESSAGE, WIN_MESSAGE
from minesweeper.prompt import (
    COMMAND_PROMPT,
    RETRY_PROMPT,
    WHERE_PROMPT,
    parse_command,
    parse_coordinate,
    run_prompt_mode,
)


class ScriptedInput:
    """Replays input lines and records the prompts shown."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


def play(session: GameSession, lines):
    """Run prompt mode over scripted lines; return (input, output text)."""
    scripted = ScriptedInput(lines)
    out = io.StringIO()
    run_prompt_mode(session, input_fn=scripted, out=out)
    return scripted, out.getvalue()


# ============================================================================
# Parsing Tests
# ============================================================================

class TestParseCommand:
    """Test command tokens."""

    @pytest.mark.parametrize(
        "text, command",
        [
            ("open", Command.OPEN),
            ("flag", Command.FLAG),
            ("open\n", Command.OPEN),
        ],
    )
    def test_known_commands(self, text: str, command: Command) -> None:
        assert parse_command(text) == command

    @pytest.mark.parametrize("text", ["", "Open", "opn", "quit", "open a1"])
    def test_unknown_commands(self, text: str) -> None:
        assert parse_command(text) is None


class TestParseCoordinate:
    """Test coordinate tokens."""

    @pytest.mark.parametrize(
        "text, position",
        [
            ("a1", (0, 0)),
            ("c7", (6, 2)),
            ("z9", (8, 25)),
            ("A1", (0, 26)),
            ("B12", (11, 27)),
            ("Z52", (51, 51)),
            ("b2\n", (1, 1)),
        ],
    )
    def test_valid_coordinates(self, text: str, position) -> None:
        assert parse_coordinate(text) == position

    @pytest.mark.parametrize(
        "text", ["", "a", "1a", "a123", "aa1", "?1", "a 1", "quit", "a-1"]
    )
    def test_invalid_coordinates(self, text: str) -> None:
        assert parse_coordinate(text) is None


# ============================================================================
# Game Loop Tests
# ============================================================================

class TestRunPromptMode:
    """Test the prompt mode loop on the corner-mine board."""

    def test_win_then_decline_retry(self, session: GameSession) -> None:
        scripted, output = play(session, ["open", "d4", "n"])
        assert scripted.prompts == [COMMAND_PROMPT, WHERE_PROMPT, RETRY_PROMPT]
        assert WIN_MESSAGE in output
        assert session.is_won is True

    def test_hitting_mine_loses(self, session: GameSession) -> None:
        _, output = play(session, ["open", "a1", "N"])
        assert LOSE_MESSAGE in output
        assert " 1|@ooo" in output

    def test_invalid_input_prompts_again(self, session: GameSession) -> None:
        scripted, output = play(session, ["dig", "open", "zz", "d4", "n"])
        assert scripted.prompts == [
            COMMAND_PROMPT,
            COMMAND_PROMPT,
            WHERE_PROMPT,
            WHERE_PROMPT,
            RETRY_PROMPT,
        ]
        assert output.count("  |abcd") == 3

    def test_quit_ends_without_result(self, session: GameSession) -> None:
        scripted, output = play(session, ["open", "quit"])
        assert scripted.prompts == [COMMAND_PROMPT, WHERE_PROMPT]
        assert WIN_MESSAGE not in output
        assert LOSE_MESSAGE not in output

    def test_end_of_input_ends_game(self, session: GameSession) -> None:
        scripted, _ = play(session, [])
        assert scripted.prompts == [COMMAND_PROMPT]

    def test_retry_starts_new_round(self, session: GameSession) -> None:
        scripted, output = play(
            session, ["open", "a1", "y", "open", "d4", "n"]
        )
        assert LOSE_MESSAGE in output
        assert WIN_MESSAGE in output
        assert scripted.prompts.count(RETRY_PROMPT) == 2

    def test_flag_blocks_open(self, session: GameSession) -> None:
        _, output = play(
            session, ["flag", "a1", "open", "a1", "open", "d4", "n"]
        )
        assert LOSE_MESSAGE not in output
        assert WIN_MESSAGE in output
        assert " 1|*1.." in output

    def test_out_of_board_coordinate_is_noop(
        self, session: GameSession
    ) -> None:
        scripted, output = play(session, ["open", "z9", "open", "d4", "n"])
        assert scripted.prompts.count(COMMAND_PROMPT) == 2
        assert WIN_MESSAGE in output
