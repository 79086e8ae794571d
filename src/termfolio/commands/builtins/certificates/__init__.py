"""Certificates command - list certifications."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from termfolio.commands.common import load_failed, nothing_yet
from termfolio.commands.registry import command_registry
from termfolio.core.datamodels import CommandResult
from termfolio.core.exceptions import StoreError
from termfolio.core.formatting import short_date

if TYPE_CHECKING:
    from termfolio.commands.context import CommandContext

logger = logging.getLogger(__name__)


@command_registry.register("certificates", "Show certifications")
async def cmd_certificates(ctx: "CommandContext", args: list[str]) -> CommandResult:
    try:
        certificates = await ctx.store.certificates.list()
    except StoreError as e:
        logger.warning(f"certificates: {e}")
        return load_failed("certificates")

    if not certificates:
        return nothing_yet("No certificates found. Use the admin panel to add certificates first.")

    out = ["🏆 Certificates", "│"]
    for cert in sorted(certificates, key=lambda c: c.date_issued, reverse=True):
        out.append(f"│ 📜 {cert.title}")
        out.append(f"│    Issuer: {cert.issuer} | Issued: {short_date(cert.date_issued)}")
        if cert.description:
            out.append(f"│    {cert.description}")
        if cert.credential_url:
            out.append(f"│    🔗 {cert.credential_url}")
        out.append("│")
    return CommandResult.success("\n".join(out))
