from __future__ import annotations

from datetime import date
from typing import Sequence

from app.application.utils.formatting import format_day_month, format_full_date, format_price
from app.domain.entities.catalog import Barber, Service

UNSPECIFIED_BARBER = "Não especificado"

NO_SERVICES = (
    "Desculpe, não há serviços disponíveis no momento. "
    "Entre em contato diretamente com a barbearia."
)
NO_BARBERS = "Desculpe, não há barbeiros disponíveis no momento."
SERVICE_NOT_FOUND = "Não encontrei esse serviço. Por favor, digite o número ou o nome correto do serviço."
BARBER_NOT_FOUND = "Não encontrei esse barbeiro. Por favor, digite o número ou o nome correto."
ASK_DATE = "Ótimo! Agora preciso saber a data. Por favor, digite a data desejada (ex: 25/12/2024 ou amanhã, ou hoje)."
INVALID_DATE = (
    'Data inválida. Por favor, digite a data no formato DD/MM/AAAA (ex: 25/12/2024) ou use "hoje" ou "amanhã".'
)
PAST_DATE = "A data não pode ser no passado. Por favor, escolha uma data futura."
INVALID_TIME = "Horário inválido. Por favor, digite um horário válido no formato HH:MM (ex: 09:00, 14:30, 18:00)."
CONFIRM_PROMPT = 'Por favor, responda "sim" para confirmar ou "não" para cancelar.'
BOOKING_CANCELLED = "Agendamento cancelado. Se precisar de algo mais, é só avisar! 😊"
BOOKING_CONFIRMED = (
    "✅ Agendamento confirmado com sucesso!\n\n"
    "O agendamento foi criado e será revisado pela barbearia. Você receberá uma confirmação em breve."
)
BOOKING_FAILED = "Desculpe, ocorreu um erro ao criar o agendamento. Entre em contato diretamente com a barbearia."
GENERIC_ERROR = "Desculpe, ocorreu um erro. Tente novamente."
GENERIC_ERROR_LATER = "Desculpe, ocorreu um erro. Tente novamente mais tarde."
CANCELLATION_INFO = (
    "Para cancelar um agendamento, você precisa entrar em contato diretamente com a barbearia "
    "pelo telefone ou email. Desculpe pelo inconveniente."
)
UNKNOWN = (
    "Desculpe, não entendi. Você pode:\n"
    '• Agendar um serviço (digite "agendar")\n'
    "• Ver seus agendamentos\n"
    "• Cancelar um agendamento\n\n"
    "Como posso ajudar?"
)


def build_greeting(client_name: str) -> str:
    return (
        f"Olá {client_name}! 👋\n\n"
        "Como posso ajudar você hoje? Você pode:\n"
        "• Agendar um serviço\n"
        "• Ver seus agendamentos\n"
        "• Cancelar um agendamento\n\n"
        "O que você gostaria de fazer?"
    )


def build_service_menu(services: Sequence[Service]) -> str:
    lines = "\n".join(f"{i}. {s.name} - {format_price(s.price)}" for i, s in enumerate(services, start=1))
    return (
        "Ótimo! Vou ajudar você a agendar. Primeiro, qual serviço você gostaria?\n\n"
        f"{lines}\n\n"
        "Por favor, digite o número ou o nome do serviço desejado."
    )


def build_date_chosen(value: date) -> str:
    return (
        f"Perfeito! Data escolhida: {format_day_month(value)}.\n\n"
        "Agora preciso saber o horário. Por favor, digite o horário desejado (ex: 14:30 ou 14h30)."
    )


def build_barber_menu(time_str: str, barbers: Sequence[Barber]) -> str:
    lines = "\n".join(f"{i}. {b.name}" for i, b in enumerate(barbers, start=1))
    return (
        f"Horário escolhido: {time_str}.\n\n"
        "Qual barbeiro você prefere?\n\n"
        f"{lines}\n\n"
        "Digite o número ou o nome do barbeiro."
    )


def build_summary(
    services: Sequence[Service],
    barber: Barber | None,
    booking_date: date,
    start_time: str,
    end_time: str,
    total_price: float,
) -> str:
    service_names = ", ".join(s.name for s in services)
    barber_name = barber.name if barber else UNSPECIFIED_BARBER
    return (
        "📅 **Resumo do Agendamento:**\n\n"
        f"📋 Serviço(s): {service_names}\n"
        f"👤 Barbeiro: {barber_name}\n"
        f"📅 Data: {format_full_date(booking_date)}\n"
        f"⏰ Horário: {start_time} - {end_time}\n"
        f"💰 Total: {format_price(total_price)}\n\n"
        "Confirma o agendamento? (sim/não)"
    )
