from __future__ import annotations

from app.domain.entities.catalog import Barber, Service

DEMO_BARBERSHOP_ID = "demo"

DEMO_SERVICES: dict[str, list[Service]] = {
    DEMO_BARBERSHOP_ID: [
        Service(id="svc_barba", name="Barba", price=30.0, duration_minutes=30, category="barba"),
        Service(id="svc_cabelo", name="Cabelo Tradicional", price=45.0, duration_minutes=45, category="cabelo"),
        Service(id="svc_combo", name="Cabelo e Barba", price=70.0, duration_minutes=75, category="combo"),
        Service(id="svc_pigmentacao", name="Pigmentação", price=50.0, duration_minutes=40, is_active=False),
        Service(id="svc_sobrancelha", name="Sobrancelha", price=15.0, duration_minutes=15),
    ],
}

DEMO_BARBERS: dict[str, list[Barber]] = {
    DEMO_BARBERSHOP_ID: [
        Barber(id="brb_carlos", name="Carlos", specialties=("degradê", "navalhado")),
        Barber(id="brb_marcos", name="Marcos", specialties=("barba",)),
        Barber(id="brb_rafael", name="Rafael", is_active=False),
    ],
}
