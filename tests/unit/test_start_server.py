"""Unit tests for start_server module."""

import os
import sys
import unittest
from unittest.mock import patch

import start_server


class TestStartServer(unittest.TestCase):
    """Tests for start_server script."""

    def setUp(self):
        """Restore sys.argv after each test."""
        self.addCleanup(setattr, sys, "argv", list(sys.argv))

    @patch("start_server.run")
    def test_main_configures_and_runs_gunicorn(self, mock_run):
        """Test that main() points Gunicorn at the WSGI application."""
        start_server.main()

        mock_run.assert_called_once()
        self.assertIn("reply_notification_service.wsgi:application", sys.argv)
        self.assertEqual(sys.argv[sys.argv.index("--bind") + 1], "0.0.0.0:8000")

    @patch.dict(
        os.environ, {"GUNICORN_BIND": "127.0.0.1:9000", "GUNICORN_WORKERS": "4"}
    )
    @patch("start_server.run")
    def test_main_reads_bind_and_workers_from_environment(self, _mock_run):
        """Test that bind address and worker count are configurable."""
        start_server.main()

        self.assertEqual(sys.argv[sys.argv.index("--bind") + 1], "127.0.0.1:9000")
        self.assertEqual(sys.argv[sys.argv.index("--workers") + 1], "4")


if __name__ == "__main__":
    unittest.main()
