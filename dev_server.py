#!/usr/bin/env python3
"""Dev launcher for genomecp.

Usage:
    # MCP Inspector (web UI on http://localhost:6274):
    ./dev_server.py

    # Or directly:
    python dev_server.py
"""

import os
import subprocess
import sys

ROOT = os.path.dirname(os.path.abspath(__file__))

# Verbose logging for manual testing
os.environ.setdefault("GENOMECP_LOG_LEVEL", "DEBUG")

if __name__ == "__main__":
    print("Try:          list_chromosomes(genome_id='hg38')")
    print("              search_genes(query='BRCA1', genome='hg38')")
    print("              get_gene_details(gene_id='672')")
    if not os.environ.get("GENOMECP_ANALYZE_VARIANT_URL"):
        print("Note:         GENOMECP_ANALYZE_VARIANT_URL unset, analyze_variant will fail")
    print()
    print("Starting MCP Inspector...")
    print()
    sys.exit(
        subprocess.call(
            ["mcp", "dev", "dev_server.py:mcp", "-e", ROOT],
            cwd=ROOT,
        )
    )
else:
    # Imported by `mcp dev dev_server.py:mcp`
    from genomecp.server import create_server

    mcp = create_server()
