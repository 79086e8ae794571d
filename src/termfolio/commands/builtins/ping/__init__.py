"""Ping command - simulated ICMP echo."""
from __future__ import annotations

import random
from typing import TYPE_CHECKING

from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult, LoadingSpec

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

PACKETS = 4


@command_registry.register("ping", "Ping a host", usage="ping [host]")
def cmd_ping(ctx: "CommandContext", args: list[str]) -> CommandResult:
    target = args[0] if args else "localhost"
    out = [f"PING {target}:"]
    for seq in range(1, PACKETS + 1):
        out.append(f"64 bytes from {target}: icmp_seq={seq} time={random.randint(10, 59)}ms")
    out += [
        "",
        f"--- {target} ping statistics ---",
        f"{PACKETS} packets transmitted, {PACKETS} received, 0% packet loss",
    ]
    return CommandResult.success(
        "\n".join(out),
        loading=LoadingSpec(label=f"Pinging {target}...", duration_ms=2000),
    )
