#!/usr/bin/env python3
"""
Tests for the command line entry point and the two front ends.
"""

import argparse
import asyncio
import json
import signal
import sys
import time
from unittest.mock import patch

import pytest
from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import DummyInput
from prompt_toolkit.output import DummyOutput

import termfolio.config.config as config_module
from termfolio.cli.app import GUI_NOTICE, HELP_BAR, TerminalApp, line_style, render_scrollback
from termfolio.cli.main import build_mailer, build_store, effective_config, main
from termfolio.cli.simple_repl import RED, RESET, YELLOW, format_line, repl
from termfolio.commands import OPEN_ADMIN_GUI
from termfolio.config import Config, ConfigManager
from termfolio.core import ClipboardUnavailable, CommandResult, Line, LineKind
from termfolio.store import HttpContentStore, InMemoryContentStore
from termfolio.terminal import TerminalSession


async def no_sleep(seconds):
    return None


@pytest.fixture
def config_home(tmp_path):
    """Point the config manager singleton at a temporary directory."""
    config_file = tmp_path / "config.json"
    config_module._manager = None
    with patch.object(ConfigManager, 'CONFIG_DIR', tmp_path):
        with patch.object(ConfigManager, 'CONFIG_FILE', config_file):
            yield config_file
    config_module._manager = None


def scripted(lines):
    """A read_line that replays ``lines`` and then signals EOF."""
    remaining = list(lines)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    read_line.prompts = prompts
    return read_line


# ============================================================================
# Config Flags
# ============================================================================

class TestConfigFlags:
    """Tests for --config, --set-config and --unset-config."""

    def test_show_config(self, config_home, capsys):
        main(["--config"])
        out = capsys.readouterr().out
        assert f"Config file: {config_home}" in out
        assert "owner_name: Christopher Joshy" in out
        assert "Available keys:" in out

    def test_set_config(self, config_home, capsys):
        main(["--set-config", "admin_session_timeout=120"])
        assert "Set admin_session_timeout = 120.0" in capsys.readouterr().out
        assert json.loads(config_home.read_text())["admin_session_timeout"] == 120.0

    def test_show_config_masks_password(self, config_home, capsys):
        main(["--set-config", "admin_password=hunter2"])
        capsys.readouterr()
        main(["--config"])
        out = capsys.readouterr().out
        assert "admin_password: ********" in out
        assert "hunter2" not in out

    def test_set_unknown_key_exits(self, config_home, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--set-config", "colour=blue"])
        assert exc.value.code == 1
        assert "Unknown config key" in capsys.readouterr().out

    def test_set_bad_number_exits(self, config_home):
        with pytest.raises(SystemExit) as exc:
            main(["--set-config", "request_timeout=soon"])
        assert exc.value.code == 1

    def test_unset_config(self, config_home, capsys):
        main(["--set-config", "prompt_user=alice"])
        main(["--unset-config", "prompt_user"])
        assert "prompt_user" not in json.loads(config_home.read_text())
        assert "Unset prompt_user" in capsys.readouterr().out

    def test_version(self, config_home, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert "0.1.0" in capsys.readouterr().out


class TestBuilders:
    """Tests for effective_config, build_store and build_mailer."""

    def make_args(self, **overrides):
        values = {"offline": False, "simple": False, "log_level": "WARNING", "api_url": None}
        values.update(overrides)
        return argparse.Namespace(**values)

    def test_effective_config_overlays_flags(self):
        cfg = effective_config(Config(), self.make_args(offline=True, api_url="http://api:9000"))
        assert cfg.offline is True
        assert cfg.api_base_url == "http://api:9000"

    def test_effective_config_keeps_api_url(self):
        cfg = effective_config(Config(api_base_url="http://saved"), self.make_args())
        assert cfg.api_base_url == "http://saved"

    def test_offline_store_is_seeded(self):
        store = build_store(Config(offline=True, admin_password="pw"))
        assert isinstance(store, InMemoryContentStore)
        assert len(asyncio.run(store.projects.list())) == 3
        assert asyncio.run(store.authenticate("pw"))

    def test_online_store(self):
        store = build_store(Config(offline=False, api_base_url="http://api:9000/"))
        assert isinstance(store, HttpContentStore)
        assert store.base_url == "http://api:9000"
        asyncio.run(store.aclose())

    def test_offline_mailer_disabled(self):
        mailer = build_mailer(Config(offline=True, mail_relay_url="https://forms.example.com/x"))
        assert not mailer.enabled
        asyncio.run(mailer.aclose())

    def test_online_mailer(self):
        mailer = build_mailer(Config(offline=False, mail_relay_url="https://forms.example.com/x"))
        assert mailer.url == "https://forms.example.com/x"
        asyncio.run(mailer.aclose())


# ============================================================================
# Line-mode REPL
# ============================================================================

class TestSimpleRepl:
    """Tests for the line-mode front end."""

    def test_session_transcript(self, store, config):
        session = TerminalSession(store, config=config, sleep=no_sleep)
        read_line = scripted(["echo hi", "   ", "nope", "ping"])
        written = []

        asyncio.run(repl(session, read_line=read_line, write=written.append, color=False))

        assert "Welcome to Christopher Joshy's Developer Portfolio" in written[0]
        assert written[1] == "hi"
        assert written[2].startswith("Command not found: nope.")
        assert written[3].startswith("PING localhost:")
        assert written[-1] == "Goodbye!"
        assert not any(line.startswith("christopher@portfolio") for line in written)
        assert read_line.prompts[0] == "christopher@portfolio:~$ "

    def test_prompt_follows_privilege(self, store, config):
        session = TerminalSession(store, config=config, sleep=no_sleep)
        read_line = scripted(["admin letmein", "exit"])
        asyncio.run(repl(session, read_line=read_line, write=lambda text: None))
        assert read_line.prompts == [
            "christopher@portfolio:~$ ",
            "christopher@portfolio:~# ",
            "christopher@portfolio:~$ ",
        ]

    @pytest.mark.skipif(sys.platform == "win32", reason="needs loop signal handlers")
    def test_ctrl_c_interrupts_running_command(self, store, config):
        sent = []

        async def sleep_then_interrupt(seconds):
            if not sent:
                sent.append(seconds)
                signal.raise_signal(signal.SIGINT)
            await asyncio.sleep(0.01)

        session = TerminalSession(store, config=config, sleep=sleep_then_interrupt)
        written = []
        asyncio.run(repl(
            session,
            read_line=scripted(["ping", "echo after"]),
            write=written.append,
            color=False,
        ))

        assert sent
        assert "^C" in written
        assert not any(line.startswith("PING localhost:") for line in written)
        assert written[-2:] == ["after", "Goodbye!"]
        assert not session.processing

    @pytest.mark.skipif(sys.platform == "win32", reason="needs loop signal handlers")
    def test_ctrl_c_at_prompt_keeps_running(self, store, config):
        session = TerminalSession(store, config=config, sleep=no_sleep)
        lines = ["echo after"]
        calls = []

        def read_line(prompt):
            calls.append(prompt)
            if len(calls) == 1:
                signal.raise_signal(signal.SIGINT)
                time.sleep(0.1)
                return ""
            if not lines:
                raise EOFError
            return lines.pop(0)

        written = []
        asyncio.run(repl(session, read_line=read_line, write=written.append, color=False))

        assert written[1:] == ["^C", "after", "Goodbye!"]

    @pytest.mark.skipif(sys.platform == "win32", reason="needs loop signal handlers")
    def test_sigint_handler_removed_on_exit(self, store, config):
        session = TerminalSession(store, config=config, sleep=no_sleep)
        asyncio.run(repl(session, read_line=scripted([]), write=lambda text: None))
        assert signal.getsignal(signal.SIGINT) is signal.default_int_handler

    def test_format_line_colors(self):
        error = Line.from_result(CommandResult.failure("bad"))
        guidance = Line.from_result(CommandResult.guidance("try"))
        output = Line.from_result(CommandResult.success("ok"))
        assert format_line(error) == f"{RED}bad{RESET}"
        assert format_line(guidance) == f"{YELLOW}try{RESET}"
        assert format_line(output) == "ok"
        assert format_line(error, color=False) == "bad"


# ============================================================================
# Full-screen App
# ============================================================================

@pytest.fixture
def app_session():
    with create_app_session(input=DummyInput(), output=DummyOutput()):
        yield


class TestRender:
    """Tests for the scrollback renderer."""

    def test_fresh_session(self, store, config):
        session = TerminalSession(store, config=config)
        fragments = render_scrollback(session)
        assert fragments[-3] == ("class:prompt", "christopher@portfolio:~$ ")
        assert fragments[-2] == ("class:command", "")
        assert fragments[-1] == ("class:cursor", " ")

    def test_hidden_cursor(self, store, config):
        session = TerminalSession(store, config=config)
        session.toggle_cursor()
        assert render_scrollback(session)[-1] == ("", " ")

    def test_command_line_split(self, store, config):
        session = TerminalSession(store, config=config, sleep=no_sleep)
        asyncio.run(session.submit("echo hi"))
        fragments = render_scrollback(session)
        assert ("class:prompt", "christopher@portfolio:~$ ") in fragments
        assert ("class:command", "echo hi") in fragments
        assert ("class:output", "hi") in fragments

    def test_no_input_line_while_processing(self, store, config):
        session = TerminalSession(store, config=config)
        session.processing = True
        fragments = render_scrollback(session)
        assert fragments[-1] == ("", "\n")

    def test_line_style(self):
        assert line_style(Line.from_result(CommandResult.failure("x"))) == "class:error"
        assert line_style(Line.from_result(CommandResult.guidance("x"))) == "class:guidance"
        assert line_style(Line(kind=LineKind.LOADING, text="x")) == "class:loading"
        assert line_style(Line(kind=LineKind.OUTPUT, text="x")) == "class:output"


class TestTerminalApp:
    """Tests for the prompt_toolkit wrapper."""

    def test_wires_session(self, app_session, store, config):
        session = TerminalSession(store, config=config)
        terminal = TerminalApp(session)
        assert session.on_event == terminal.on_event
        assert session.clipboard == terminal.read_clipboard

    def test_gui_event_sets_status(self, app_session, store, config):
        terminal = TerminalApp(TerminalSession(store, config=config))
        assert terminal.status is None
        terminal.on_event(OPEN_ADMIN_GUI)
        assert terminal.status == " " + GUI_NOTICE

    def test_other_events_ignored(self, app_session, store, config):
        terminal = TerminalApp(TerminalSession(store, config=config))
        terminal.on_event("something_else")
        assert terminal.status is None
        assert HELP_BAR.startswith(" Enter")

    def test_read_clipboard(self, app_session, store, config):
        terminal = TerminalApp(TerminalSession(store, config=config))
        terminal.app.clipboard.set_text("hello")
        assert asyncio.run(terminal.read_clipboard()) == "hello"

    def test_empty_clipboard(self, app_session, store, config):
        terminal = TerminalApp(TerminalSession(store, config=config))
        with pytest.raises(ClipboardUnavailable):
            asyncio.run(terminal.read_clipboard())
