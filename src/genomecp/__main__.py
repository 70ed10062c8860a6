"""Entry point for running genomecp as a module: python -m genomecp."""

import logging
import sys
from typing import Literal

from .config import GenomeCPConfig
from .server import create_server

Transport = Literal["stdio", "sse", "streamable-http"]


def _add_http_middleware(app, config: GenomeCPConfig):  # noqa: ANN001, ANN201
    """Add security middleware to a Starlette app for HTTP transports."""
    from starlette.middleware.trustedhost import TrustedHostMiddleware

    from .middleware.security import SecurityHeadersMiddleware

    # Outermost middleware runs first
    app.add_middleware(SecurityHeadersMiddleware)

    # DNS rebinding protection
    if config.trusted_hosts:
        app.add_middleware(TrustedHostMiddleware, allowed_hosts=config.trusted_hosts)


def main() -> None:
    """Run the genomecp MCP server."""
    try:
        config = GenomeCPConfig.from_env()
    except ValueError as e:
        print(f"Invalid genomecp configuration: {e}", file=sys.stderr)
        sys.exit(1)

    # stdout carries the stdio protocol, so log to stderr
    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    transport: Transport = config.transport  # type: ignore[assignment]
    server = create_server(config)

    if transport == "stdio":
        server.run(transport="stdio")
    else:
        # For HTTP transports, get the Starlette app and add middleware
        import anyio
        import uvicorn

        app = server.sse_app() if transport == "sse" else server.streamable_http_app()

        _add_http_middleware(app, config)

        async def _serve() -> None:
            uvi_config = uvicorn.Config(
                app,
                host=config.host,
                port=config.port,
                log_level=config.log_level.lower(),
            )
            uvi_server = uvicorn.Server(uvi_config)
            await uvi_server.serve()

        anyio.run(_serve)


if __name__ == "__main__":
    main()
