"""
Tests for the command line parser and the command registry.
"""

import asyncio

import pytest

from termfolio.commands import CommandContext, CommandRegistry, command_not_found
from termfolio.commands.parser import split_verb, strip_quotes, tokenize
from termfolio.core import CommandError, CommandResult, PrivilegeMode


# ============================================================================
# Parser Tests
# ============================================================================

class TestTokenize:
    """Tests for quote-aware tokenizing."""

    def test_plain_words(self):
        assert tokenize("project 1") == ["project", "1"]

    def test_quoted_groups(self):
        line = 'contact "Jane Doe" jane@example.com "Hi there"'
        assert tokenize(line) == ["contact", "Jane Doe", "jane@example.com", "Hi there"]

    def test_unbalanced_quotes_fall_back(self):
        assert tokenize('echo "hello world') == ["echo", '"hello', "world"]

    def test_split_verb_lowercases_verb_only(self):
        assert split_verb("  HELP Me  ") == ("help", ["Me"])

    def test_split_verb_blank(self):
        assert split_verb("   ") == ("", [])

    def test_strip_quotes(self):
        assert strip_quotes('"hello') == "hello"


# ============================================================================
# Registry Tests
# ============================================================================

@pytest.fixture
def registry():
    reg = CommandRegistry()

    @reg.register("hello", "Say hello", aliases=["hi"])
    def cmd_hello(ctx, args):
        return CommandResult.success("Hello " + " ".join(args))

    @reg.register("secret", "Admin only", requires_admin=True)
    async def cmd_secret(ctx, args):
        return CommandResult.success("classified")

    @reg.register("broken", "Returns junk")
    def cmd_broken(ctx, args):
        return "not a result"

    return reg


def make_ctx(store, privilege=PrivilegeMode.GUEST):
    return CommandContext(privilege=privilege, store=store)


class TestCommandRegistry:
    """Tests for registration, resolution and dispatch."""

    def test_dispatch_sync_handler(self, registry, empty_store):
        result = asyncio.run(registry.dispatch("hello there", make_ctx(empty_store)))
        assert result.text == "Hello there"

    def test_verb_is_case_insensitive(self, registry, empty_store):
        result = asyncio.run(registry.dispatch("HELLO", make_ctx(empty_store)))
        assert result.ok

    def test_alias(self, registry, empty_store):
        result = asyncio.run(registry.dispatch("hi you", make_ctx(empty_store)))
        assert result.text == "Hello you"

    def test_unknown_verb(self, registry, empty_store):
        result = asyncio.run(registry.dispatch("nope", make_ctx(empty_store)))
        assert not result.ok
        assert result.text == "Command not found: nope. Type 'help' for available commands."

    def test_admin_verb_hidden_from_guest(self, registry, empty_store):
        """An admin verb reads exactly like an unknown one to a guest."""
        result = asyncio.run(registry.dispatch("secret", make_ctx(empty_store)))
        assert result.text == command_not_found("secret").text
        assert result.tone == command_not_found("secret").tone

    def test_admin_verb_for_admin(self, registry, empty_store):
        ctx = make_ctx(empty_store, PrivilegeMode.ADMIN)
        result = asyncio.run(registry.dispatch("secret", ctx))
        assert result.text == "classified"

    def test_non_result_raises(self, registry, empty_store):
        with pytest.raises(CommandError):
            asyncio.run(registry.dispatch("broken", make_ctx(empty_store)))

    def test_invalid_name(self, registry):
        with pytest.raises(CommandError):
            registry.register("two words", "bad")

    def test_reregister_replaces(self, registry, empty_store):
        @registry.register("hello", "Replaced")
        def cmd_new(ctx, args):
            return CommandResult.success("new")

        result = asyncio.run(registry.dispatch("hello", make_ctx(empty_store)))
        assert result.text == "new"

    def test_resolve(self, registry):
        assert registry.resolve("secret", PrivilegeMode.GUEST) is None
        assert registry.resolve("secret", PrivilegeMode.ADMIN).name == "secret"

    def test_resolve_alias(self, registry):
        assert registry.resolve("hi", PrivilegeMode.GUEST).name == "hello"
        assert registry.get("nope") is None


class TestGlobalRegistry:
    """The builtin verb table."""

    GUEST_VERBS = [
        "help", "about", "skills", "projects", "project", "certificates",
        "contact", "resume", "social", "fastfetch", "sudo", "admin", "exit",
        "clear", "echo", "ping", "cat", "whoami", "pwd", "date", "uptime", "ls",
    ]
    ADMIN_VERBS = ["add", "edit", "update", "delete", "view"]

    def test_guest_verbs_registered(self, builtin_commands):
        for verb in self.GUEST_VERBS:
            assert builtin_commands.resolve(verb, PrivilegeMode.GUEST) is not None, verb

    def test_admin_verbs_hidden_from_guests(self, builtin_commands):
        for verb in self.ADMIN_VERBS:
            assert builtin_commands.resolve(verb, PrivilegeMode.GUEST) is None, verb
            assert builtin_commands.resolve(verb, PrivilegeMode.ADMIN) is not None, verb

    def test_logout_is_exit_alias(self, builtin_commands):
        assert builtin_commands.get("logout").name == "exit"
