"""MCP prompt registry.

Prompts are predefined conversation/workflow templates that the client can invoke explicitly.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP


def register_prompts(mcp: FastMCP) -> None:
    """Register prompt templates on the MCP server."""

    @mcp.prompt()
    def summarize_log(log_path: str, levels: str = "ERROR,WARNING,FATAL") -> list[dict[str, Any]]:
        """Build a prompt that summarizes a log file from its parsed statistics."""
        wanted = [s.strip().upper() for s in levels.split(",") if s.strip()]
        levels_display = "[" + ", ".join(f'"{s}"' for s in wanted) + "]"
        return [
            {
                "role": "system",
                "content": (
                    "You are a careful operations assistant. Summarize log files from "
                    "tool output only. Do not invent lines or numbers."
                ),
            },
            {
                "role": "user",
                "content": (
                    "Summarize the log file using analyze_log. Follow this workflow:\n"
                    f"- Call analyze_log with log_path={log_path} and levels={levels_display}.\n"
                    "- Report the detected format, total lines and the time range "
                    "(first/last timestamp) from the summary.\n"
                    "- Use statistics.levels and statistics.http for the breakdown.\n"
                    "- Quote up to 5 entries as evidence with their line_number.\n"
                    "- If truncated is true, say that only the first part of the file was read.\n"
                ),
            },
            {
                "role": "user",
                "content": [
                    {
                        "type": "text",
                        "text": "Optional: if you need raw context, you can read the log via:",
                    },
                    {"type": "resource", "uri": f"log://{log_path}"},
                ],
            },
        ]
