"""Tests for EmailService."""

import smtplib
from unittest.mock import MagicMock, patch

from django.test import SimpleTestCase

from core.services.email_service import EmailService


@patch("core.services.email_service.smtplib.SMTP")
class TestEmailService(SimpleTestCase):
    """Test suite for EmailService."""

    def setUp(self):
        """Set up test fixtures."""
        self.email_service = EmailService()

    def _smtp(self, mock_smtp_class):
        mock_smtp = MagicMock()
        mock_smtp_class.return_value.__enter__.return_value = mock_smtp
        return mock_smtp

    def _sent_message(self, mock_smtp):
        return mock_smtp.send_message.call_args[0][0]

    def test_send_email_success(self, mock_smtp_class):
        """Test successful email sending."""
        mock_smtp = self._smtp(mock_smtp_class)

        result = self.email_service.send_email(
            to_email="test@example.com",
            subject="Test Subject",
            html_content="<p>Test message</p>",
        )

        self.assertIs(result, True)
        mock_smtp_class.assert_called_once_with("smtp.example.com", 587)
        mock_smtp.starttls.assert_called_once()
        mock_smtp.login.assert_called_once_with("smtp-user", "smtp-password")
        mock_smtp.send_message.assert_called_once()

    def test_html_content_type_sends_alternative_parts(self, mock_smtp_class):
        """Test HTML mail carries a generated plain text part."""
        mock_smtp = self._smtp(mock_smtp_class)

        self.email_service.send_email(
            to_email="test@example.com",
            subject="Test",
            html_content="<p>Hello &amp; welcome</p>",
            headers=["Content-Type: text/html; charset=UTF-8"],
        )

        msg = self._sent_message(mock_smtp)
        self.assertEqual(msg.get_content_type(), "multipart/alternative")
        plain, html = msg.get_payload()
        self.assertEqual(plain.get_content_type(), "text/plain")
        self.assertEqual(plain.get_payload(decode=True).decode(), "Hello & welcome")
        self.assertEqual(html.get_content_type(), "text/html")
        self.assertEqual(html.get_content_charset(), "utf-8")

    def test_plain_content_type_sends_single_part(self, mock_smtp_class):
        """Test a text/plain Content-Type header produces a plain message."""
        mock_smtp = self._smtp(mock_smtp_class)

        self.email_service.send_email(
            to_email="test@example.com",
            subject="Test",
            html_content="Just text",
            headers=["Content-Type: text/plain; charset=ISO-8859-1"],
        )

        msg = self._sent_message(mock_smtp)
        self.assertEqual(msg.get_content_type(), "text/plain")
        self.assertEqual(msg.get_content_charset(), "iso-8859-1")

    def test_from_header_overrides_default_sender(self, mock_smtp_class):
        """Test a From header replaces DEFAULT_FROM_EMAIL."""
        mock_smtp = self._smtp(mock_smtp_class)

        self.email_service.send_email(
            to_email="test@example.com",
            subject="Test",
            html_content="<p>Test</p>",
            headers=["From: Blog <blog@example.com>"],
        )

        self.assertEqual(
            self._sent_message(mock_smtp)["From"], "Blog <blog@example.com>"
        )

    def test_from_argument_wins_over_header(self, mock_smtp_class):
        """Test an explicit from_email is not replaced by a header."""
        mock_smtp = self._smtp(mock_smtp_class)

        self.email_service.send_email(
            to_email="test@example.com",
            subject="Test",
            html_content="<p>Test</p>",
            from_email="custom@example.com",
            headers=["From: blog@example.com"],
        )

        self.assertEqual(self._sent_message(mock_smtp)["From"], "custom@example.com")

    def test_default_sender(self, mock_smtp_class):
        """Test DEFAULT_FROM_EMAIL is used without a From header."""
        mock_smtp = self._smtp(mock_smtp_class)

        self.email_service.send_email(
            to_email="test@example.com",
            subject="Test",
            html_content="<p>Test</p>",
        )

        self.assertEqual(self._sent_message(mock_smtp)["From"], "noreply@example.com")

    def test_cc_and_bcc_are_delivered(self, mock_smtp_class):
        """Test Cc is a visible header and Bcc only an envelope recipient."""
        mock_smtp = self._smtp(mock_smtp_class)

        self.email_service.send_email(
            to_email="test@example.com",
            subject="Test",
            html_content="<p>Test</p>",
            headers=["Cc: cc@example.com", "Bcc: Hidden <bcc@example.com>"],
        )

        msg = self._sent_message(mock_smtp)
        self.assertEqual(msg["Cc"], "cc@example.com")
        self.assertIsNone(msg["Bcc"])
        self.assertEqual(
            mock_smtp.send_message.call_args[1]["to_addrs"],
            ["test@example.com", "cc@example.com", "bcc@example.com"],
        )

    def test_custom_headers_are_added(self, mock_smtp_class):
        """Test unrecognised headers are copied onto the message."""
        mock_smtp = self._smtp(mock_smtp_class)

        self.email_service.send_email(
            to_email="test@example.com",
            subject="Test",
            html_content="<p>Test</p>",
            headers=["X-Comment-ID: 10", "Reply-To: replies@example.com"],
        )

        msg = self._sent_message(mock_smtp)
        self.assertEqual(msg["X-Comment-ID"], "10")
        self.assertEqual(msg["Reply-To"], "replies@example.com")

    def test_malformed_header_lines_are_ignored(self, mock_smtp_class):
        """Test header lines without a colon are skipped."""
        mock_smtp = self._smtp(mock_smtp_class)

        result = self.email_service.send_email(
            to_email="test@example.com",
            subject="Test",
            html_content="<p>Test</p>",
            headers=["not a header"],
        )

        self.assertIs(result, True)
        self.assertIsNone(self._sent_message(mock_smtp)["not a header"])

    def test_send_email_invalid_email(self, mock_smtp_class):
        """Test sending email with invalid email address."""
        with self.assertRaisesRegex(ValueError, "Invalid email address"):
            self.email_service.send_email(
                to_email="invalid-email",
                subject="Test",
                html_content="<p>Test</p>",
            )

        mock_smtp_class.assert_not_called()

    def test_send_email_smtp_exception(self, mock_smtp_class):
        """Test SMTP errors are raised to the caller."""
        mock_smtp = self._smtp(mock_smtp_class)
        mock_smtp.send_message.side_effect = smtplib.SMTPException("SMTP error")

        with self.assertRaises(smtplib.SMTPException):
            self.email_service.send_email(
                to_email="test@example.com",
                subject="Test",
                html_content="<p>Test</p>",
            )


class TestHtmlToPlain(SimpleTestCase):
    """Tests for the HTML to plain text conversion."""

    def test_strips_tags_and_decodes_entities(self):
        """Test tags are removed and common entities decoded."""
        text = EmailService()._html_to_plain(
            "<p>Fish &amp; chips</p>\n\n\n<blockquote>&quot;Yum&quot;</blockquote>"
        )

        self.assertEqual(text, 'Fish & chips\n\n"Yum"')
