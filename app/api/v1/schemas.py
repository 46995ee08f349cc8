from datetime import date

from pydantic import BaseModel, Field


class IncomingMessageSchema(BaseModel):
    barbershop_id: str = Field(min_length=1)
    client_id: str = Field(min_length=1)
    client_name: str = Field(min_length=1)
    text: str = Field(min_length=1)


class AppointmentDataSchema(BaseModel):
    date: date
    time: str
    service_ids: list[str]
    barber_id: str | None = None


class ReplySchema(BaseModel):
    content: str
    type: str = "text"
    appointment_data: AppointmentDataSchema | None = None
    message_id: str | None = None


class ChatTurnResponseSchema(BaseModel):
    chat_id: str
    intent: str
    action: str
    status: str | None = None
    replies: list[ReplySchema] = Field(default_factory=list)
