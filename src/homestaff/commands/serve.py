"""serve — start the MCP server (requires homestaff[mcp] extra)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from homestaff.commands._base import HsCommand

if TYPE_CHECKING:
    from homestaff.commands._context import AppContext


@click.command(
    cls=HsCommand,
    examples="""\
  # Start the MCP server (stdio transport, default)
  homestaff serve

  # Streamable HTTP on custom host/port
  homestaff serve --transport streamable-http --host 0.0.0.0 --port 9000

  # Empty household (no demo users or tasks)
  HOMESTAFF_STORE__SEED_DEMO_DATA=false homestaff serve""",
)
@click.option(
    "--transport",
    default=None,
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    help="MCP transport protocol. [default: from config, else stdio]",
)
@click.option("--host", default=None, help="Bind address (HTTP transports only).")
@click.option("--port", default=None, type=int, help="Listen port (HTTP transports only).")
@click.pass_obj
def serve(app: AppContext, transport: str | None, host: str | None, port: int | None) -> None:
    """Start the MCP server (requires homestaff[mcp] extra).

    The household lives in memory for as long as the server runs.
    """
    from homestaff.mcp.server import create_server, mcp_available

    if not mcp_available:
        click.echo("MCP not installed. Install with: pip install homestaff[mcp]", err=True)
        raise SystemExit(1)

    overrides = {
        k: v for k, v in {"transport": transport, "host": host, "port": port}.items() if v
    }
    server_config = app.settings.server.model_copy(update=overrides)
    settings = app.settings.model_copy(update={"server": server_config})

    server = create_server(settings=settings)
    server.run(transport=server_config.transport)
