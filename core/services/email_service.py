"""Email service for sending notifications via SMTP."""

import re
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import getaddresses

from django.conf import settings

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_CONTENT_TYPE = "text/html"
DEFAULT_CHARSET = "utf-8"


class EmailService:
    """Service for sending emails via SMTP.

    Handles header parsing, HTML/plain text conversion, and SMTP delivery.
    Makes a single delivery attempt per call.
    """

    def __init__(self) -> None:
        """Initialize email service with SMTP configuration."""
        self.smtp_host = settings.EMAIL_HOST
        self.smtp_port = settings.EMAIL_PORT
        self.smtp_user = settings.EMAIL_HOST_USER
        self.smtp_password = settings.EMAIL_HOST_PASSWORD
        self.use_tls = settings.EMAIL_USE_TLS
        self.from_email = settings.DEFAULT_FROM_EMAIL

    def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        from_email: str | None = None,
        headers: list[str] | None = None,
    ) -> bool:
        """Send an email via SMTP.

        Args:
            to_email: Recipient email address
            subject: Email subject line
            html_content: Email body
            from_email: Sender email (defaults to a From header, then
                DEFAULT_FROM_EMAIL)
            headers: Raw ``Name: value`` header lines. Content-Type selects
                HTML or plain text; From, Cc, Bcc and any other header are
                applied to the message.

        Returns:
            True if email was sent successfully

        Raises:
            ValueError: If email address is invalid
            smtplib.SMTPException: If SMTP operation fails
        """
        # Validate email address
        if not self._is_valid_email(to_email):
            error_msg = f"Invalid email address: {to_email}"
            raise ValueError(error_msg)

        content_type = DEFAULT_CONTENT_TYPE
        charset = DEFAULT_CHARSET
        sender = from_email
        cc: list[str] = []
        bcc: list[str] = []
        extra_headers: list[tuple[str, str]] = []

        for name, value in self._parse_headers(headers or []):
            header = name.lower()
            if header == "content-type":
                content_type, charset = self._parse_content_type(value, charset)
            elif header == "from":
                sender = sender or value
            elif header == "cc":
                cc.extend(address for _, address in getaddresses([value]) if address)
            elif header == "bcc":
                bcc.extend(address for _, address in getaddresses([value]) if address)
            else:
                extra_headers.append((name, value))

        # Use default from_email if not provided
        sender = sender or self.from_email

        msg = self._build_message(html_content, content_type, charset)
        msg["Subject"] = subject
        msg["From"] = sender
        msg["To"] = to_email
        if cc:
            msg["Cc"] = ", ".join(cc)
        for name, value in extra_headers:
            msg[name] = value

        try:
            # Connect to SMTP server
            with smtplib.SMTP(self.smtp_host, self.smtp_port) as server:
                if self.use_tls:
                    server.starttls()

                # Login if credentials provided
                if self.smtp_user and self.smtp_password:
                    server.login(self.smtp_user, self.smtp_password)

                server.send_message(msg, to_addrs=[to_email, *cc, *bcc])

                logger.info(
                    "email_sent",
                    to_email=to_email,
                    subject=subject,
                    content_type=content_type,
                )
                return True

        except smtplib.SMTPException as e:
            logger.error(
                "email_send_failed",
                to_email=to_email,
                subject=subject,
                error=str(e),
            )
            raise

    def _build_message(
        self, content: str, content_type: str, charset: str
    ) -> MIMEMultipart | MIMEText:
        """Create the message body for the given content type.

        HTML content is sent as multipart/alternative with a plain text
        version generated from it.
        """
        if content_type != "text/html":
            return MIMEText(content, "plain", charset)

        msg = MIMEMultipart("alternative")
        msg.attach(MIMEText(self._html_to_plain(content), "plain", charset))
        msg.attach(MIMEText(content, "html", charset))
        return msg

    def _parse_headers(self, headers: list[str]) -> list[tuple[str, str]]:
        """Split raw header lines into (name, value) pairs.

        Lines without a colon are ignored. Line breaks inside values are
        folded into spaces.
        """
        parsed = []
        for line in headers:
            if ":" not in line:
                continue
            name, value = line.split(":", 1)
            name = name.strip()
            value = " ".join(value.splitlines()).strip()
            if name:
                parsed.append((name, value))
        return parsed

    def _parse_content_type(self, value: str, charset: str) -> tuple[str, str]:
        """Extract the MIME type and charset from a Content-Type value."""
        parts = [part.strip() for part in value.split(";")]
        content_type = parts[0].lower() or DEFAULT_CONTENT_TYPE
        for part in parts[1:]:
            if part.lower().startswith("charset="):
                charset = part.split("=", 1)[1].strip().strip('"') or charset
        return content_type, charset

    def _is_valid_email(self, email: str) -> bool:
        """Validate email address format.

        Args:
            email: Email address to validate

        Returns:
            True if email is valid, False otherwise
        """
        pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
        return bool(re.match(pattern, email or ""))

    def _html_to_plain(self, html: str) -> str:
        """Convert HTML to plain text.

        Args:
            html: HTML content

        Returns:
            Plain text version of the HTML
        """
        # Remove HTML tags
        text = re.sub(r"<[^>]+>", "", html)

        # Decode common HTML entities
        text = text.replace("&nbsp;", " ")
        text = text.replace("&lt;", "<")
        text = text.replace("&gt;", ">")
        text = text.replace("&amp;", "&")
        text = text.replace("&quot;", '"')

        # Clean up whitespace
        text = re.sub(r"\n\s*\n", "\n\n", text)
        text = text.strip()

        return text
