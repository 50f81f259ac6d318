"""
Mailer - emails the finished poster link to the user.

The email carries a greeting, the theme, the QR code (as an inline
attachment), a "View Image" button and an inline preview of the poster.
"""

import html
import logging
import smtplib
from email.message import EmailMessage
from email.utils import formataddr, make_msgid
from typing import Optional

from qr_code import decode_data_url
from settings import Settings

logger = logging.getLogger(__name__)


class Mailer:
    """SMTP-over-SSL sender for result emails."""

    subject = "🎉 Your AI Selfie Booth Photo is Ready!"

    def __init__(self, settings: Settings):
        self.user = settings.email_user
        self.password = settings.email_pass
        self.host = settings.smtp_host
        self.port = settings.smtp_port
        self.sender_name = settings.email_sender_name

        if not self.user or not self.password:
            logger.warning("EMAIL_USER/EMAIL_PASS not set - result emails disabled")

    def is_configured(self) -> bool:
        return bool(self.user and self.password)

    def build_message(
        self,
        to: str,
        name: str,
        theme: str,
        image_url: str,
        qr_data_url: Optional[str] = None
    ) -> EmailMessage:
        """Build the HTML result email."""
        qr_cid = make_msgid(domain="selfie-booth") if qr_data_url else None

        qr_html = ""
        if qr_cid:
            qr_html = f'<img src="cid:{qr_cid[1:-1]}" alt="QR Code" width="150" />'

        safe_url = html.escape(image_url, quote=True)
        body = f"""
        <div style="font-family: Arial, sans-serif; padding: 20px; color: #333;">
          <h2>Hi {html.escape(name or "there")} 👋</h2>
          <p>Your AI Selfie Booth photo is ready!</p>
          <p><b>Theme:</b> {html.escape(theme)}</p>
          {qr_html}
          <p>Click below to view your photo:</p>
          <a href="{safe_url}" style="display:inline-block;background:#00c4cc;color:#fff;padding:10px 20px;border-radius:5px;text-decoration:none;">View Image</a>
          <br/><br/>
          <img src="{safe_url}" alt="Your AI Selfie" width="300" style="border-radius:10px;margin-top:10px;" />
          <p style="margin-top:30px;">Thanks for using our AI Selfie Booth 💫</p>
        </div>
        """

        message = EmailMessage()
        message["Subject"] = self.subject
        message["From"] = formataddr((self.sender_name, self.user or ""))
        message["To"] = to
        message.set_content(f"Your AI Selfie Booth photo is ready: {image_url}")
        message.add_alternative(body, subtype="html")

        if qr_cid:
            html_part = message.get_payload()[1]
            html_part.add_related(
                decode_data_url(qr_data_url),
                maintype="image",
                subtype="png",
                cid=qr_cid,
            )

        return message

    def send_result_email(
        self,
        to: str,
        name: str,
        theme: str,
        image_url: str,
        qr_data_url: Optional[str] = None
    ) -> bool:
        """
        Send the result email.

        Returns:
            True if the message was handed to the SMTP server. Failures are
            logged and reported as False; they never raise.
        """
        if not self.is_configured():
            logger.warning(f"Email not configured - skipping email to {to}")
            return False

        try:
            message = self.build_message(to, name, theme, image_url, qr_data_url)
            with smtplib.SMTP_SSL(self.host, self.port, timeout=30) as smtp:
                smtp.login(self.user, self.password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError, ValueError) as e:
            logger.error(f"Email send failed: {e}")
            return False

        logger.info(f"Email sent successfully to {to}")
        return True
