"""
Tests for the MCP server setup and tools.
"""

import asyncio
import json

import pytest

from networkdays.mcp_server import create_mcp_server


@pytest.fixture
def server():
    """Create an MCP server instance."""
    return create_mcp_server()


def call_tool(server, name: str, arguments: dict) -> dict:
    """Call a tool and decode its JSON text content."""
    result = asyncio.run(server.call_tool(name, arguments))
    if isinstance(result, tuple):
        # Newer FastMCP releases return (content, structured_content)
        result = result[0]
    return json.loads(result[0].text)


class TestMcpServer:
    """Tests for the MCP tool registration."""

    def test_tools_registered(self, server):
        tools = asyncio.run(server.list_tools())

        assert {tool.name for tool in tools} == {"networkdays", "workday", "list_weekend_codes"}

    def test_tool_descriptions(self, server):
        tools = {tool.name: tool for tool in asyncio.run(server.list_tools())}

        assert "NETWORKDAYS" in tools["networkdays"].description
        assert "WORKDAY" in tools["workday"].description


class TestNetworkdaysTool:
    """Tests for the networkdays tool."""

    def test_week(self, server):
        data = call_tool(server, "networkdays", {"start": "2023-01-02", "end": "2023-01-08"})

        assert data["working_days"] == 5
        assert data["weekend_days"] == 2
        assert data["start_date"] == "2023-01-02"
        assert data["date_system"] == "1900"

    def test_reversed_with_holidays(self, server):
        data = call_tool(
            server, "networkdays", {"start": "44934", "end": "44928", "holidays": ["44929", "2023-01-07"]}
        )

        assert data["working_days"] == -4

    def test_country_holidays(self, server):
        data = call_tool(
            server,
            "networkdays",
            {"start": "2023-01-01", "end": "2023-01-15", "country": "DE", "subdivision": "BY"},
        )

        assert data["working_days"] == 9

    def test_invalid_date(self, server):
        data = call_tool(server, "networkdays", {"start": "someday", "end": "2023-01-08"})

        assert "error" in data
        assert "Invalid date" in data["error"]


class TestWorkdayTool:
    """Tests for the workday tool."""

    def test_five_workdays(self, server):
        data = call_tool(server, "workday", {"start": "2023-01-02", "workdays": 5})

        assert data["result"] == 44935.0
        assert data["result_date"] == "2023-01-09"

    def test_skips_holiday(self, server):
        data = call_tool(server, "workday", {"start": "44928", "workdays": 1, "holidays": ["44929"]})

        assert data["result"] == 44930.0

    def test_country_holidays(self, server):
        """Epiphany (Friday 2023-01-06) is skipped in Bayern."""
        data = call_tool(
            server,
            "workday",
            {"start": "2023-01-05", "workdays": 1, "country": "DE", "subdivision": "BY"},
        )

        assert data["result_date"] == "2023-01-09"

    def test_negative_serial(self, server):
        data = call_tool(server, "workday", {"start": "-3", "workdays": 1})

        assert "error" in data


class TestWeekendCodesTool:
    """Tests for the list_weekend_codes tool."""

    def test_lists_all_codes(self, server):
        data = call_tool(server, "list_weekend_codes", {})

        assert data["count"] == 14
        assert data["weekend_codes"][0] == {"code": 1, "days": "Saturday, Sunday"}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
