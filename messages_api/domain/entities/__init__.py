from .message import Message, MessageState, MessageUser

__all__ = ["Message", "MessageState", "MessageUser"]
