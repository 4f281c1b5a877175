from typing import Annotated

from fastapi import APIRouter, Depends, status

from ....application.dtos import (
    CreateMessageDTO,
    MessageDetailResponse,
    SentMessageResponse,
)
from ....application.ports.inbound import (
    GetMessageUseCase,
    MarkMessageReadUseCase,
    SendMessageUseCase,
)
from ...middleware import AuthenticatedUser, require_auth
from ..dependencies import (
    get_mark_read_service,
    get_message_service,
    get_send_message_service,
)

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get(
    "/{message_id}",
    response_model=MessageDetailResponse,
    summary="Get message details",
    description="Retrieve a message the caller sent or received, with both users.",
)
async def get_message(
    message_id: int,
    user: Annotated[AuthenticatedUser, Depends(require_auth)],
    service: Annotated[GetMessageUseCase, Depends(get_message_service)],
) -> MessageDetailResponse:
    message = await service.execute(message_id, username=user.username)
    return MessageDetailResponse(message=message)


@router.post(
    "/",
    response_model=SentMessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Send a message",
    description="Send a message from the authenticated user to another user.",
)
async def send_message(
    request: CreateMessageDTO,
    user: Annotated[AuthenticatedUser, Depends(require_auth)],
    service: Annotated[SendMessageUseCase, Depends(get_send_message_service)],
) -> SentMessageResponse:
    message = await service.execute(request, username=user.username)
    return SentMessageResponse(message=message)


@router.post(
    "/{message_id}/read",
    response_model=MessageDetailResponse,
    summary="Mark a message as read",
    description="Only the recipient may mark a message as read.",
)
async def mark_message_read(
    message_id: int,
    user: Annotated[AuthenticatedUser, Depends(require_auth)],
    service: Annotated[MarkMessageReadUseCase, Depends(get_mark_read_service)],
) -> MessageDetailResponse:
    message = await service.execute(message_id, username=user.username)
    return MessageDetailResponse(message=message)
