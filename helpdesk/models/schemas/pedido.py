from datetime import date
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from helpdesk.models.entities import PedidoStatus, Sector, Taller, TipoTarea

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class PedidoWriteRequest(BaseModel):
    nombre: RequiredText
    legajo: RequiredText
    fecha: date
    sector: Sector
    sub_equipo: RequiredText
    taller: Taller
    tipo_tarea: TipoTarea
    parte: RequiredText
    problema: RequiredText
    estado: PedidoStatus = "abierto"


class PedidoUpdateRequest(BaseModel):
    nombre: RequiredText | None = None
    legajo: RequiredText | None = None
    fecha: date | None = None
    sector: Sector | None = None
    sub_equipo: RequiredText | None = None
    taller: Taller | None = None
    tipo_tarea: TipoTarea | None = None
    parte: RequiredText | None = None
    problema: RequiredText | None = None
    estado: PedidoStatus | None = None


class EstadoChangeRequest(BaseModel):
    estado: PedidoStatus


class PedidoSearch(BaseModel):
    search_term: str | None = None
    sector: Sector | None = None
    taller: Taller | None = None
    estado: PedidoStatus | None = None
    fecha_desde: date | None = None
    fecha_hasta: date | None = None


class PedidoImportRequest(BaseModel):
    content: str


class PedidoRead(BaseModel):
    id: int
    nombre: str
    legajo: str
    fecha: date
    sector: Sector
    sub_equipo: str
    taller: Taller
    tipo_tarea: TipoTarea
    parte: str
    problema: str
    estado: PedidoStatus

    model_config = ConfigDict(from_attributes=True)


class PedidoStatusCounts(BaseModel):
    abiertos: int = 0
    en_proceso: int = 0
    cerrados: int = 0


class PedidoStats(BaseModel):
    total: int = 0
    estados: PedidoStatusCounts = Field(default_factory=PedidoStatusCounts)
    por_sector: dict[str, int] = Field(default_factory=dict)
    por_taller: dict[str, int] = Field(default_factory=dict)


class PedidoDataResponse(BaseModel):
    data: PedidoRead


class PedidoListResponse(BaseModel):
    data: list[PedidoRead]


class PedidoStatsResponse(BaseModel):
    data: PedidoStats
