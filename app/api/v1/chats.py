import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.v1.schemas import (
    AppointmentDataSchema, ChatTurnResponseSchema,
    IncomingMessageSchema, ReplySchema,
)
from app.wiring.dependencies import get_handle_incoming_message_use_case
from app.application.use_cases.handle_incoming_message import HandleIncomingMessageUseCase
from app.application.exceptions import MessageDeliveryError
from app.domain.entities.message import InboundMessage

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/chats/{chat_id}/messages", response_model=ChatTurnResponseSchema)
def receive_message(
    chat_id: str,
    req: IncomingMessageSchema,
    uc: HandleIncomingMessageUseCase = Depends(get_handle_incoming_message_use_case),
):
    message = InboundMessage(
        chat_id=chat_id,
        barbershop_id=req.barbershop_id,
        client_id=req.client_id,
        client_name=req.client_name,
        text=req.text,
    )
    try:
        result = uc.handle(message)
    except MessageDeliveryError as e:
        logger.exception("Reply delivery failed", extra={"chat_id": chat_id})
        raise HTTPException(status_code=502, detail=str(e))

    return ChatTurnResponseSchema(
        chat_id=result.chat_id,
        intent=result.intent.value,
        action=result.action,
        status=result.status,
        replies=[
            ReplySchema(
                content=reply.content,
                type=reply.type,
                message_id=message_id,
                appointment_data=(
                    AppointmentDataSchema(
                        date=reply.appointment_data.date,
                        time=reply.appointment_data.time,
                        service_ids=list(reply.appointment_data.service_ids),
                        barber_id=reply.appointment_data.barber_id,
                    )
                    if reply.appointment_data else None
                ),
            )
            for reply, message_id in zip(result.replies, result.message_ids)
        ],
    )


@router.delete("/chats/{chat_id}/context", status_code=204)
def clear_context(
    chat_id: str,
    uc: HandleIncomingMessageUseCase = Depends(get_handle_incoming_message_use_case),
) -> Response:
    uc.clear(chat_id)
    return Response(status_code=204)
