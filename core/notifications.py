"""
Operator email notifications.

Contact and enrollment submissions send a summary to CONTACT_EMAIL. Sending
is fire-and-forget: `dispatch_notification` hands the work to a daemon thread
and any failure ends up in the log, never in the HTTP response.
"""
import logging
import threading

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from django.utils.html import strip_tags

from .exceptions import NotificationError

logger = logging.getLogger(__name__)


def send_notification(subject, template_name, context, reply_to=None):
    """Render `template_name` and mail it to the operator inbox.

    Raises NotificationError when the message cannot be built or delivered.
    """
    recipient = getattr(settings, 'CONTACT_EMAIL', None)
    if not recipient:
        raise NotificationError('CONTACT_EMAIL is not configured')

    try:
        html_body = render_to_string(template_name, context)
        message = EmailMultiAlternatives(
            subject=subject,
            body=strip_tags(html_body),
            from_email=settings.DEFAULT_FROM_EMAIL,
            to=[recipient],
            reply_to=[reply_to] if reply_to else None,
        )
        message.attach_alternative(html_body, 'text/html')
        message.send(fail_silently=False)
    except Exception as exc:
        raise NotificationError(f'Could not send "{subject}": {exc}') from exc


def _deliver(subject, template_name, context, reply_to):
    try:
        send_notification(subject, template_name, context, reply_to=reply_to)
    except NotificationError as exc:
        logger.error(f"Error sending notification email: {exc}")
    else:
        logger.info(f"Notification sent: {subject}")


def dispatch_notification(subject, template_name, context, reply_to=None):
    """Send without blocking or failing the caller."""
    # Mail headers cannot carry line breaks
    subject = ' '.join(subject.split())
    if not getattr(settings, 'NOTIFICATIONS_ASYNC', True):
        _deliver(subject, template_name, context, reply_to)
        return None

    worker = threading.Thread(
        target=_deliver,
        args=(subject, template_name, context, reply_to),
        name='notification-mailer',
        daemon=True,
    )
    worker.start()
    return worker
