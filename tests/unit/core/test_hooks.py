"""Unit tests for the header filter extension point."""

from unittest.mock import sentinel

from django.test import SimpleTestCase, override_settings

from core import hooks


def add_reply_to(headers, reply, parent):
    """Header filter used through the COMMENT_REPLY_HEADER_FILTERS setting."""
    return [*headers, "Reply-To: replies@example.com"]


class TestHeaderFilters(SimpleTestCase):
    """Tests for register/apply of header filters."""

    def tearDown(self):
        """Remove filters registered by a test."""
        for header_filter in list(hooks._registered_filters):
            hooks.unregister_header_filter(header_filter)

    def test_no_filters_returns_headers_unchanged(self):
        """Test headers pass through when nothing is registered."""
        headers = ["Content-Type: text/html; charset=UTF-8"]

        result = hooks.apply_header_filters(headers, sentinel.reply, sentinel.parent)

        self.assertEqual(result, headers)

    def test_filter_receives_both_comments(self):
        """Test filters are called with the reply and the parent."""
        calls = []

        @hooks.register_header_filter
        def record(headers, reply, parent):
            calls.append((reply, parent))
            return headers

        hooks.apply_header_filters([], sentinel.reply, sentinel.parent)

        self.assertEqual(calls, [(sentinel.reply, sentinel.parent)])

    def test_filters_chain_in_order(self):
        """Test each filter sees the previous filter's output."""
        hooks.register_header_filter(lambda h, r, p: [*h, "X-First: 1"])
        hooks.register_header_filter(lambda h, r, p: [*h, "X-Second: 2"])

        result = hooks.apply_header_filters(["A: a"], None, None)

        self.assertEqual(result, ["A: a", "X-First: 1", "X-Second: 2"])

    def test_filter_can_override_headers(self):
        """Test a filter may replace the content type."""
        hooks.register_header_filter(
            lambda h, r, p: ["Content-Type: text/plain; charset=UTF-8"]
        )

        result = hooks.apply_header_filters(
            ["Content-Type: text/html; charset=UTF-8"], None, None
        )

        self.assertEqual(result, ["Content-Type: text/plain; charset=UTF-8"])

    def test_filter_returning_none_keeps_headers(self):
        """Test a filter that returns None does not drop headers."""
        hooks.register_header_filter(lambda h, r, p: None)

        result = hooks.apply_header_filters(["A: a"], None, None)

        self.assertEqual(result, ["A: a"])

    def test_register_is_idempotent(self):
        """Test registering the same filter twice runs it once."""
        hooks.register_header_filter(add_reply_to)
        hooks.register_header_filter(add_reply_to)

        self.assertEqual(hooks.get_header_filters(), [add_reply_to])

    @override_settings(
        COMMENT_REPLY_HEADER_FILTERS=["tests.unit.core.test_hooks.add_reply_to"]
    )
    def test_filters_from_settings_run_first(self):
        """Test dotted-path filters from settings are applied."""
        hooks.register_header_filter(lambda h, r, p: [*h, "X-Runtime: 1"])

        result = hooks.apply_header_filters([], None, None)

        self.assertEqual(
            result, ["Reply-To: replies@example.com", "X-Runtime: 1"]
        )
