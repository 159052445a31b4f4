"""Fixed example records used to populate empty stores."""

from datetime import UTC, date, datetime

from helpdesk.models.entities import Pedido, Ticket
from helpdesk.models.schemas.ticket import TicketCreateRequest


def sample_tickets() -> list[Ticket]:
    login_at = datetime(2024, 1, 15, 9, 0, tzinfo=UTC)
    report_at = datetime(2024, 1, 14, 14, 30, tzinfo=UTC)
    invoice_at = datetime(2024, 1, 13, 11, 15, tzinfo=UTC)
    return [
        Ticket(
            id="1",
            title="Problema con el sistema de login",
            description="Los usuarios no pueden acceder al sistema desde esta mañana",
            requester="Juan Pérez",
            assigned_to="Ana García",
            status="open",
            priority="high",
            tags=["login", "acceso", "urgente"],
            created_at=login_at,
            updated_at=login_at,
        ),
        Ticket(
            id="2",
            title="Solicitud de nueva funcionalidad",
            description="Necesitamos agregar un reporte de ventas mensual",
            requester="María López",
            assigned_to="Carlos Ruiz",
            status="pending",
            priority="medium",
            tags=["nueva funcionalidad", "reportes"],
            created_at=report_at,
            updated_at=report_at,
        ),
        Ticket(
            id="3",
            title="Error en la impresión de facturas",
            description="Las facturas se imprimen con formato incorrecto",
            requester="Roberto Silva",
            assigned_to="Ana García",
            status="claimed",
            priority="medium",
            tags=["impresión", "facturas"],
            created_at=invoice_at,
            updated_at=invoice_at,
        ),
    ]


def sample_maintenance_tickets() -> list[TicketCreateRequest]:
    return [
        TicketCreateRequest(
            title="Fuga de aceite - Sistema de presión",
            description=(
                "Se detectó una fuga de aceite en el sistema de presión del cabezal principal "
                "de la corrugadora. Requiere atención inmediata para evitar daños mayores."
            ),
            requester="Juan Pérez",
            assigned_to="Equipo Mecánico",
            status="open",
            priority="high",
            tags=["corrugadora", "cabezal", "mecanico", "mantenimiento", "sistema-presion"],
        ),
        TicketCreateRequest(
            title="Corto circuito - Panel de control",
            description=(
                "Se reportó un corto circuito en el panel de control del compresor del sector "
                "ward_rdc. El equipo eléctrico está trabajando en la solución."
            ),
            requester="María González",
            assigned_to="Equipo Eléctrico",
            status="claimed",
            priority="high",
            tags=["ward_rdc", "compresor", "electrico", "seguridad", "panel-control"],
        ),
        TicketCreateRequest(
            title="Refuerzo de base - Cosedora Industrial",
            description=(
                "Se requiere reforzar la base de la cosedora industrial para mejorar la "
                "estabilidad durante el funcionamiento. Trabajo de herrería."
            ),
            requester="Carlos Rodríguez",
            assigned_to="Equipo de Herrería",
            status="open",
            priority="medium",
            tags=["cosedoras", "herreria", "mejora", "estructura", "base"],
        ),
    ]


def sample_pedidos() -> list[Pedido]:
    return [
        Pedido(
            id=80001,
            nombre="Juan Pérez",
            legajo="LP001",
            fecha=date(2024, 1, 15),
            sector="corrugadora",
            sub_equipo="Cabezal 1",
            taller="mecanico",
            tipo_tarea="mantenimiento",
            parte="Sistema de presión",
            problema=(
                "Fuga de aceite en el cabezal principal. "
                "Se requiere revisión y posible cambio de juntas."
            ),
            estado="abierto",
        ),
        Pedido(
            id=80002,
            nombre="María González",
            legajo="LP002",
            fecha=date(2024, 1, 15),
            sector="ward_rdc",
            sub_equipo="Atadora mosca AO5",
            taller="electrico",
            tipo_tarea="seguridad",
            parte="Sistema eléctrico",
            problema="Corto circuito en el panel de control. Intermitente, requiere diagnóstico completo.",
            estado="proceso",
        ),
        Pedido(
            id=80003,
            nombre="Carlos López",
            legajo="LP003",
            fecha=date(2024, 1, 15),
            sector="c3000_rdc",
            sub_equipo="Feed master",
            taller="mecanico",
            tipo_tarea="mejora",
            parte="Transportador de entrada",
            problema="Optimización del sistema de alimentación para aumentar velocidad de producción.",
            estado="abierto",
        ),
        Pedido(
            id=80004,
            nombre="Ana Martínez",
            legajo="LP004",
            fecha=date(2024, 1, 14),
            sector="c2000",
            sub_equipo="Colero",
            taller="herreria",
            tipo_tarea="mantenimiento",
            parte="Estructura del colero",
            problema="Desgaste en las guías de movimiento. Se requiere soldadura y refuerzo.",
            estado="abierto",
        ),
        Pedido(
            id=80005,
            nombre="Roberto Silva",
            legajo="LP005",
            fecha=date(2024, 1, 14),
            sector="gral_planta",
            sub_equipo="Caldera",
            taller="mecanico",
            tipo_tarea="seguridad",
            parte="Sistema de seguridad",
            problema="Revisión de válvulas de seguridad y calibración de presostatos.",
            estado="proceso",
        ),
        Pedido(
            id=80006,
            nombre="Laura Fernández",
            legajo="LP006",
            fecha=date(2024, 1, 13),
            sector="corrugadora",
            sub_equipo="Cabezal 2",
            taller="electrico",
            tipo_tarea="reparacion",
            parte="Control de temperatura",
            problema="Falla en el sensor de temperatura del cabezal. Lecturas incorrectas.",
            estado="cerrado",
        ),
        Pedido(
            id=80007,
            nombre="Miguel Rodríguez",
            legajo="LP007",
            fecha=date(2024, 1, 13),
            sector="ward_rdc",
            sub_equipo="Empacadora",
            taller="mecanico",
            tipo_tarea="mantenimiento",
            parte="Sistema neumático",
            problema="Fuga de aire en las conexiones principales. Pérdida de presión.",
            estado="abierto",
        ),
    ]
