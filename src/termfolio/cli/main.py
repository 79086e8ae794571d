#!/usr/bin/env python3
"""
CLI entry point for the portfolio terminal (termfolio command).
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from termfolio import __version__
from termfolio.config import DEFAULTS, Config, coerce_config_value, get_config_manager
from termfolio.store import ContentStore, HttpContentStore, InMemoryContentStore, MailRelay

# ANSI escape codes for grey text
GREY = "\033[90m"
RESET = "\033[0m"


def feedback(msg: str) -> None:
    """Print feedback message in grey to stderr."""
    print(f"{GREY}{msg}{RESET}", file=sys.stderr)


def print_config():
    """Print current configuration."""
    cfg_mgr = get_config_manager()
    settings = cfg_mgr.list_settings()

    print(f"Config file: {cfg_mgr.CONFIG_FILE}")

    if settings:
        print("\nCustom settings:")
        for key, value in settings.items():
            if key == "admin_password":
                value = "********"
            print(f"  {key}: {value}")

    print("\nDefaults (used when not set):")
    for key, value in DEFAULTS.items():
        if key not in settings:
            if key == "admin_password":
                value = "********"
            print(f"  {key}: {value}")

    print("\nSet with: termfolio --set-config key=value")
    print(f"Available keys: {', '.join(Config.model_fields)}")
    print()


def effective_config(cfg: Config, args: argparse.Namespace) -> Config:
    """Overlay command-line flags on the loaded config."""
    overrides = {
        "offline": args.offline,
        "simple": args.simple,
        "log_level": args.log_level,
    }
    if args.api_url:
        overrides["api_base_url"] = args.api_url
    return cfg.model_copy(update=overrides)


def build_store(cfg: Config) -> ContentStore:
    """Seeded in-memory store when offline, the REST API otherwise."""
    if cfg.get("offline"):
        return InMemoryContentStore(admin_password=cfg.get("admin_password"), seed=True)
    return HttpContentStore(cfg.get("api_base_url"), timeout=float(cfg.get("request_timeout")))


def build_mailer(cfg: Config) -> MailRelay:
    # Offline sessions never reach the relay
    url = None if cfg.get("offline") else cfg.get("mail_relay_url")
    return MailRelay(url or None, timeout=float(cfg.get("request_timeout")))


async def run(cfg: Config) -> None:
    """Build a session and drive it with the chosen front end."""
    from termfolio.logging import close_session_logging, configure_session_logging
    from termfolio.terminal import SilentAudio, TerminalBell, TerminalSession

    store = build_store(cfg)
    mailer = build_mailer(cfg)
    audio = TerminalBell() if cfg.get("sound") else SilentAudio()
    session = TerminalSession(store, mailer=mailer, config=cfg, audio=audio)

    log_path = configure_session_logging(session.id)
    feedback(f"Session log: {log_path}")
    try:
        if cfg.get("simple"):
            from termfolio.cli.simple_repl import repl
            await repl(session)
        else:
            from termfolio.cli.app import TerminalApp
            await TerminalApp(session).run()
    finally:
        await session.close()
        await mailer.aclose()
        await store.aclose()
        close_session_logging()


def main(argv: Optional[list[str]] = None):
    """Main entry point for the termfolio CLI."""
    # Load config for defaults
    cfg_mgr = get_config_manager()
    cfg = cfg_mgr.config

    parser = argparse.ArgumentParser(
        description="Developer portfolio in a terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Config file: {cfg_mgr.CONFIG_FILE}

Examples:
    termfolio                                  # Connect to the configured API
    termfolio --offline                        # Browse the built-in sample content
    termfolio --api-url http://host:5000       # Use another API server
    termfolio --config                         # Show current config
    termfolio --set-config owner_name=Alice    # Change the portfolio owner
        """,
    )
    parser.add_argument("--offline", action="store_true",
                        default=cfg.get("offline"),
                        help="Use seeded in-memory content instead of the API")
    parser.add_argument("--api-url", metavar="URL",
                        help=f"Portfolio API base URL (default: {cfg.get('api_base_url')})")
    parser.add_argument("--simple", action="store_true",
                        default=cfg.get("simple"),
                        help="Use the line-mode REPL (no full-screen terminal)")
    parser.add_argument("--log-level", default=cfg.get("log_level"),
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        type=str.upper,
                        help=f"Console log level (default: {cfg.get('log_level')})")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Config management
    parser.add_argument("--config", action="store_true",
                        help="Show current configuration")
    parser.add_argument("--set-config", metavar="KEY=VALUE",
                        help="Set a config value (see --config for keys)")
    parser.add_argument("--unset-config", metavar="KEY",
                        help="Unset a config value (reset to default)")

    args = parser.parse_args(argv)

    # Handle --config
    if args.config:
        print_config()
        return

    # Handle --set-config
    if args.set_config:
        try:
            key, value = args.set_config.split("=", 1)
            key = key.strip()
            value = coerce_config_value(key, value.strip())
            cfg_mgr.set(key, value)
            print(f"Set {key} = {value}")
            print(f"Saved to {cfg_mgr.CONFIG_FILE}")
        except ValueError as e:
            print(f"Error: {e}")
            sys.exit(1)
        return

    # Handle --unset-config
    if args.unset_config:
        try:
            cfg_mgr.unset(args.unset_config)
            print(f"Unset {args.unset_config}")
            print(f"Saved to {cfg_mgr.CONFIG_FILE}")
        except ValueError as e:
            print(f"Error: {e}")
            sys.exit(1)
        return

    from termfolio.commands import load_all_commands
    from termfolio.logging import configure_console_logging

    cfg = effective_config(cfg, args)
    configure_console_logging(cfg.get("log_level"))

    commands_dir = cfg.get("commands_dir")
    load_all_commands(Path(commands_dir).expanduser() if commands_dir else None)

    if cfg.get("offline"):
        feedback("Offline mode: using built-in sample content")

    try:
        asyncio.run(run(cfg))
    except KeyboardInterrupt:
        print("\nGoodbye!")


if __name__ == "__main__":
    main()
