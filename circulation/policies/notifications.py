"""Notification policies: channels for telling a borrower about their loan.

Delivery here is presentational. A channel renders the message through its
display collaborator and logs it; a channel that cannot deliver reports
``False`` instead of raising, so a real gateway can be slotted in later
without changing how the loan manager calls it.
"""
from abc import ABC, abstractmethod
from typing import Optional

from circulation.core.config import settings
from circulation.core.logging import get_logger
from circulation.presentation.display import Display, NullDisplay
from circulation.utils.text import sanitize_text, single_line, truncate_text

logger = get_logger(__name__)

SMS_MIN_LENGTH = 20


class NotificationPolicy(ABC):
    """Notification channel capability."""

    channel = "generic"

    def __init__(self, display: Optional[Display] = None):
        self.display = display or NullDisplay()

    @abstractmethod
    def notify(self, message: str, recipient: str) -> bool:
        """Deliver ``message`` to ``recipient``; True when delivered."""

    def _deliver(self, rendered: str, recipient: str) -> bool:
        try:
            self.display.display(rendered)
        except Exception as e:
            logger.error(
                f"{self.channel} delivery to {recipient} failed: {e}",
                extra={"channel": self.channel, "recipient": recipient, "error_type": type(e).__name__}
            )
            return False

        logger.info(
            f"{self.channel} sent to {recipient}",
            extra={"channel": self.channel, "recipient": recipient}
        )
        return True


class EmailNotifier(NotificationPolicy):
    """Direct-message style channel; the full message is delivered."""

    channel = "email"

    def notify(self, message: str, recipient: str) -> bool:
        body = sanitize_text(message)
        return self._deliver(f"📧 Email to {recipient}: {body}", recipient)


class SmsNotifier(NotificationPolicy):
    """Short-text channel; the message is folded to one line and cut to fit."""

    channel = "sms"

    def __init__(self, display: Optional[Display] = None, max_length: Optional[int] = None):
        super().__init__(display)
        self.max_length = settings.sms_max_length if max_length is None else max_length
        if self.max_length < SMS_MIN_LENGTH:
            raise ValueError(f"max_length must be at least {SMS_MIN_LENGTH}, got {self.max_length}")

    def notify(self, message: str, recipient: str) -> bool:
        text = truncate_text(single_line(message), self.max_length)
        return self._deliver(f"📱 SMS to {recipient}: {text}", recipient)
