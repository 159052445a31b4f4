from pydantic import BaseModel, Field

from helpdesk.models.entities import TicketPriority


def _default_taller_mapping() -> dict[str, str]:
    return {
        "mecanico": "Equipo Mecánico",
        "electrico": "Equipo Eléctrico",
        "herreria": "Equipo de Herrería",
        "otro": "Equipo General",
    }


def _default_estado_priority_mapping() -> dict[str, TicketPriority]:
    return {
        "abierto": "high",
        "proceso": "medium",
        "cerrado": "low",
    }


def _default_sectors() -> list[str]:
    return [
        "corrugadora",
        "ward_rdc",
        "ward_ffg",
        "c3000_rdc",
        "c2000",
        "cosedoras",
        "gral_planta",
        "automotores",
        "expedicion",
        "jumbo",
    ]


class BaseConfig(BaseModel):
    taller_mapping: dict[str, str] = Field(default_factory=_default_taller_mapping)
    estado_priority_mapping: dict[str, TicketPriority] = Field(
        default_factory=_default_estado_priority_mapping
    )
    sectors: list[str] = Field(default_factory=_default_sectors)
    task_types: list[str] = Field(
        default_factory=lambda: ["mantenimiento", "reparacion", "seguridad", "mejora", "otro"]
    )
    workshops: list[str] = Field(
        default_factory=lambda: ["mecanico", "electrico", "herreria", "otro"]
    )


class BaseConfigUpdate(BaseModel):
    taller_mapping: dict[str, str] | None = None
    estado_priority_mapping: dict[str, TicketPriority] | None = None
    sectors: list[str] | None = None
    task_types: list[str] | None = None
    workshops: list[str] | None = None


class BaseConfigResponse(BaseModel):
    data: BaseConfig
