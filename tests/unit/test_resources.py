"""Unit tests for the resources module."""

from unittest.mock import MagicMock, patch

from shell_split_mcp.resources import get_grammar, get_limits, register_resources


def test_get_grammar():
    grammar = get_grammar()

    assert [op["symbol"] for op in grammar["control_operators"]] == ["&&", "||", "&", "|", ";"]
    assert [r["symbol"] for r in grammar["redirections"]] == [">", ">>", "<", "<>"]
    assert set(grammar["separators"]) == {" ", "\t", ">", "<", "|", "&", ";"}
    assert grammar["quote"] == '"'
    assert all(op["description"] for op in grammar["control_operators"])


def test_get_limits():
    with patch("shell_split_mcp.config.MAX_INPUT_SIZE", 100):
        with patch("shell_split_mcp.config.MAX_COMMANDS", 5):
            limits = get_limits()

    assert limits == {"max_input_size": 100, "max_commands": 5, "multi_line": False}


def test_register_resources():
    """Test registering MCP resources."""
    mock_mcp = MagicMock()

    register_resources(mock_mcp)

    assert mock_mcp.resource.call_count == 2

    expected_resources = [
        {
            "uri": "shell://grammar/operators",
            "name": "shell_grammar",
            "description": "Get the operators and redirections recognized by the splitter",
        },
        {
            "uri": "shell://config/limits",
            "name": "shell_limits",
            "description": "Get the input limits applied by the server",
        },
    ]

    for call, expected in zip(mock_mcp.resource.call_args_list, expected_resources):
        kwargs = call[1]
        assert kwargs["uri"] == expected["uri"]
        assert kwargs["name"] == expected["name"]
        assert kwargs["description"] == expected["description"]
        assert kwargs["mime_type"] == "application/json"
