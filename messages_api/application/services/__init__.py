from .get_message_service import GetMessageService
from .mark_message_read_service import MarkMessageReadService
from .send_message_service import SendMessageService

__all__ = [
    "GetMessageService",
    "MarkMessageReadService",
    "SendMessageService",
]
