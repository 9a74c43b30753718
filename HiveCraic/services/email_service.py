# services/email_service.py
"""
Outgoing email over SMTP (STARTTLS).
Without MAIL_USER / MAIL_PASS the message is written to the log instead (development mode).
"""
import logging
import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart

from config.settings import settings

logger = logging.getLogger(__name__)


def send_email(to_email: str, subject: str, html_body: str) -> bool:
    """
    Send an HTML email.

    Returns:
        True if sent (or logged in development mode), False on SMTP failure
    """
    if not settings.MAIL_USER or not settings.MAIL_PASS:
        logger.info("EMAIL (development mode, not sent) to=%s subject=%s\n%s", to_email, subject, html_body)
        return True

    try:
        msg = MIMEMultipart("alternative")
        msg["From"] = f"{settings.MAIL_FROM_NAME} <{settings.MAIL_FROM_EMAIL}>"
        msg["To"] = to_email
        msg["Subject"] = subject
        msg.attach(MIMEText(html_body, "html"))

        with smtplib.SMTP(settings.MAIL_HOST, settings.MAIL_PORT) as server:
            server.starttls()
            server.login(settings.MAIL_USER, settings.MAIL_PASS)
            server.send_message(msg)

        logger.info("Email sent to %s", to_email)
        return True

    except (smtplib.SMTPException, OSError):
        logger.exception("Could not send email to %s", to_email)
        return False


def send_password_reset_email(to_email: str, reset_link: str, user_name: str) -> bool:
    subject = "Reset your password - Hive Craic"

    html_body = f"""
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="utf-8">
        <style>
            body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #333; }}
            .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
            .header {{ background-color: #d98e04; color: white; padding: 20px; text-align: center; }}
            .content {{ padding: 30px; background-color: #fffaf0; }}
            .button {{
                display: inline-block;
                padding: 12px 30px;
                background-color: #d98e04;
                color: white;
                text-decoration: none;
                border-radius: 5px;
                margin: 20px 0;
            }}
            .footer {{ padding: 20px; text-align: center; font-size: 12px; color: #666; }}
        </style>
    </head>
    <body>
        <div class="container">
            <div class="header">
                <h1>Password reset</h1>
            </div>
            <div class="content">
                <p>Hi <strong>{user_name}</strong>,</p>
                <p>We received a request to reset the password of your Hive Craic account.</p>
                <div style="text-align: center;">
                    <a href="{reset_link}" class="button">Reset password</a>
                </div>
                <p>Or paste this link into your browser:</p>
                <p style="word-break: break-all; background-color: #eee; padding: 10px;">{reset_link}</p>
                <p>This link expires in {settings.PASSWORD_RESET_TOKEN_EXPIRE_MINUTES} minutes.</p>
                <p>If you did not ask for this, you can ignore this email. Your password will not change.</p>
            </div>
            <div class="footer">
                <p>Automatic message, please do not reply.</p>
            </div>
        </div>
    </body>
    </html>
    """

    return send_email(to_email, subject, html_body)
