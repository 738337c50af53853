"""Module entrypoint.

Allows:
    python -m mcp_log_insight
"""

from __future__ import annotations

from mcp_log_insight.server.log_server import main

if __name__ == "__main__":
    main()
