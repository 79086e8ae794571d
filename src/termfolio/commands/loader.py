"""
Command loader - discovers and loads command packages.

Built-in commands live in ``termfolio.commands.builtins``, one package
per verb. Extra commands can be loaded from a user directory
(``commands_dir`` in the config), with the same layout:

    # ~/.termfolio/commands/hello/__init__.py
    from termfolio.commands import command_registry
    from termfolio.core import CommandResult

    @command_registry.register("hello", "Say hello")
    def cmd_hello(ctx, args):
        return CommandResult.success("Hello!")

A user command registered under a builtin's name replaces the builtin.
"""

from __future__ import annotations

import importlib
import logging
import sys
from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from typing import NamedTuple

logger = logging.getLogger(__name__)

PACKAGE_BUILTINS_DIR = Path(__file__).parent / "builtins"
BUILTINS_PACKAGE = "termfolio.commands.builtins"
USER_MODULE_PREFIX = "termfolio_user_cmd"


class LoadResult(NamedTuple):
    name: str
    ok: bool
    error: str = ""


def _is_command_package(path: Path) -> bool:
    # Hidden and private directories never hold commands
    if not path.is_dir() or path.name.startswith((".", "_")):
        return False
    if not (path / "__init__.py").exists():
        logger.debug(f"Skipping {path.name}: not a package")
        return False
    return True


def discover_commands(commands_dir: Path) -> list[Path]:
    """
    Find command packages directly under ``commands_dir``.

    Returns:
        The ``__init__.py`` of each package, sorted by directory name.
        Empty if the directory is missing or is not a directory.
    """
    if not commands_dir.is_dir():
        if commands_dir.exists():
            logger.warning(f"Commands path is not a directory: {commands_dir}")
        return []
    return [
        entry / "__init__.py"
        for entry in sorted(commands_dir.iterdir())
        if _is_command_package(entry)
    ]


def load_builtin_commands() -> int:
    """Import every builtin command package. Returns the number loaded."""
    loaded = 0
    for init_file in discover_commands(PACKAGE_BUILTINS_DIR):
        name = init_file.parent.name
        try:
            importlib.import_module(f"{BUILTINS_PACKAGE}.{name}")
        except ImportError as e:
            logger.error(f"Failed to load builtin command '{name}': {e}")
            continue
        loaded += 1
    return loaded


def load_command(init_file: Path, prefix: str = USER_MODULE_PREFIX) -> LoadResult:
    """
    Execute one command package from its ``__init__.py``.

    Registration happens as a side effect of the module's decorators.
    A module that raises while executing is dropped from ``sys.modules``.
    """
    name = init_file.parent.name
    module_name = f"{prefix}.{name}"

    spec = spec_from_file_location(module_name, init_file)
    if spec is None or spec.loader is None:
        return LoadResult(name, False, "no module spec")

    module = module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except SyntaxError as e:
        sys.modules.pop(module_name, None)
        return LoadResult(name, False, f"Syntax error: {e}")
    except Exception as e:
        sys.modules.pop(module_name, None)
        return LoadResult(name, False, f"{type(e).__name__}: {e}")
    return LoadResult(name, True)


def load_user_commands(user_dir: Path) -> int:
    """Load every command package under ``user_dir``. Returns the number loaded."""
    results = [load_command(init_file) for init_file in discover_commands(user_dir)]
    for result in results:
        if result.ok:
            logger.info(f"Loaded user command: {result.name}")
        else:
            logger.warning(f"Skipped user command '{result.name}': {result.error}")
    return sum(result.ok for result in results)


def load_all_commands(user_dir: Path | None = None) -> int:
    """
    Load builtin commands, then user commands from ``user_dir`` if given.

    Returns:
        Total number of command packages loaded.
    """
    total = load_builtin_commands()
    if user_dir is not None:
        total += load_user_commands(Path(user_dir).expanduser())
    logger.debug(f"Loaded {total} command packages")
    return total
