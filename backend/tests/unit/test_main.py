"""Unit tests for the command-line entry point."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from infrastructure.config.settings import Settings
from main import build_parser, main, parse_parent_ids, run_command


class TestParseParentIds:
    """Test parent id parsing."""

    def test_pairs(self):
        """Test name=value pairs become a mapping."""
        assert parse_parent_ids(["blog_id=1", "order_id=2"]) == {"blog_id": "1", "order_id": "2"}
        assert parse_parent_ids(None) == {}

    @pytest.mark.parametrize("value", ["blog_id", "=1", "blog_id="])
    def test_malformed(self, value):
        """Test incomplete pairs are rejected."""
        with pytest.raises(ValueError, match="name=value"):
            parse_parent_ids([value])


class TestRunCommand:
    """Test command dispatch against a mock transport."""

    @pytest.mark.asyncio
    async def test_count_nested(self, mock_client, make_response):
        """Test counting a nested resource passes its parent id."""
        mock_client.get.return_value = make_response({"count": 3})
        args = build_parser().parse_args(["count", "articles", "--parent", "blog_id=5"])

        result = await run_command(mock_client, args, {"blog_id": "5"})

        assert result == {"count": 3}
        mock_client.get.assert_awaited_once_with("blogs/5/articles/count", None)

    @pytest.mark.asyncio
    async def test_list(self, mock_client, make_response):
        """Test listing returns the page and its cursor."""
        mock_client.get.return_value = make_response({"webhooks": [{"id": 1, "topic": "orders/create"}]})
        args = build_parser().parse_args(["list", "webhooks", "--limit", "1"])

        result = await run_command(mock_client, args, {})

        assert result == {"webhooks": [{"id": 1, "topic": "orders/create"}], "next_page_info": None}
        mock_client.get.assert_awaited_once_with("webhooks", {"limit": "1"})

    @pytest.mark.asyncio
    async def test_shop(self, mock_client, make_response):
        """Test the shop command fetches the current shop."""
        mock_client.get.return_value = make_response({"shop": {"id": 1, "name": "My Shop"}})
        args = build_parser().parse_args(["shop"])

        assert await run_command(mock_client, args, {}) == {"id": 1, "name": "My Shop"}


class TestMain:
    """Test the entry point's exit codes."""

    @pytest.mark.asyncio
    async def test_invalid_settings_exit_code(self):
        """Test a configuration error is logged and exits with status 1."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None, SHOPIFY_SHOP_DOMAIN="example.com")

        with patch("main.get_settings", side_effect=exc_info.value), \
                patch("main.setup_logging"), \
                patch("main.logger") as logger:
            assert await main(["shop"]) == 1

        logger.error.assert_called_once()
        assert logger.error.call_args.args[0] == "Invalid configuration"
