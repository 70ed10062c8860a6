#!/usr/bin/env python3
"""Docker health check script for genomecp.

Pre-flight check: verifies genomecp, its config and server are importable and
functional. With ``--http``, also hits the local HTTP endpoint of a running
sse/streamable-http server.

Exit 0 = healthy, Exit 1 = unhealthy.
"""

import os
import sys


def check_health(http: bool = False) -> bool:
    if not _check_imports():
        return False
    return _check_http() if http else True


def _check_http() -> bool:
    """Verify the HTTP server is responding."""
    import httpx

    port = os.environ.get("GENOMECP_PORT", "8000")
    transport = os.environ.get("GENOMECP_TRANSPORT", "sse")
    path = "/sse" if transport == "sse" else "/mcp"
    url = f"http://127.0.0.1:{port}{path}"
    try:
        with httpx.stream("GET", url, timeout=3.0) as resp:
            # Streaming endpoints stay open; the status line is enough
            return resp.status_code < 500
    except httpx.HTTPError as exc:
        print(f"HTTP health check failed: {exc}", file=sys.stderr)
        return False


def _check_imports() -> bool:
    """Verify genomecp package is importable and functional."""
    try:
        from genomecp import __version__

        assert __version__, "Version string is empty"

        from genomecp.config import GenomeCPConfig

        config = GenomeCPConfig.from_env()
        assert config.timeout > 0, "timeout must be positive"

        from genomecp.server import create_server

        server = create_server(config)
        assert server.name == "genomecp", f"Unexpected server name: {server.name}"

        return True
    except Exception:
        import traceback

        traceback.print_exc(file=sys.stderr)
        return False


if __name__ == "__main__":
    sys.exit(0 if check_health(http="--http" in sys.argv[1:]) else 1)
