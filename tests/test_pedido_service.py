import json
from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest
from helpdesk.models.schemas.pedido import PedidoSearch, PedidoUpdateRequest, PedidoWriteRequest
from helpdesk.repositories.pedido_repository import PEDIDOS_KEY, PedidoRepository
from helpdesk.repositories.storage import InMemoryStorage
from helpdesk.services.pedido_service import PedidoService


def _build_service(storage: InMemoryStorage) -> PedidoService:
    return PedidoService(pedido_repository=PedidoRepository(storage))


def _payload(**overrides: object) -> PedidoWriteRequest:
    data: dict[str, object] = {
        "nombre": "Sofía Benítez",
        "legajo": "LP100",
        "fecha": date(2024, 2, 1),
        "sector": "jumbo",
        "sub_equipo": "Bobinadora",
        "taller": "electrico",
        "tipo_tarea": "reparacion",
        "parte": "Motor principal",
        "problema": "El motor se detiene bajo carga",
    }
    data.update(overrides)
    return PedidoWriteRequest(**data)


@pytest.fixture
def pedido_service(storage: InMemoryStorage) -> PedidoService:
    return _build_service(storage)


def test_empty_storage_is_seeded_with_samples(
    pedido_service: PedidoService, storage: InMemoryStorage
) -> None:
    pedidos = pedido_service.list_pedidos()

    assert [pedido.id for pedido in pedidos] == list(range(80001, 80008))
    assert storage.get_item(PEDIDOS_KEY) is not None


def test_stored_empty_collection_is_not_reseeded(storage: InMemoryStorage) -> None:
    _build_service(storage).clear_pedidos()

    assert _build_service(storage).list_pedidos() == []


def test_malformed_slot_falls_back_to_samples(storage: InMemoryStorage) -> None:
    storage.set_item(PEDIDOS_KEY, '[{"id": "not-a-number"}]')

    assert len(_build_service(storage).list_pedidos()) == 7


def test_sample_stats(pedido_service: PedidoService) -> None:
    stats = pedido_service.get_stats()

    assert stats.total == 7
    assert stats.estados.abiertos == 4
    assert stats.estados.en_proceso == 2
    assert stats.estados.cerrados == 1
    assert stats.por_sector["corrugadora"] == 2
    assert stats.por_sector["ward_rdc"] == 2
    assert stats.por_taller == {"mecanico": 4, "electrico": 2, "herreria": 1}


def test_stats_of_empty_collection(pedido_service: PedidoService) -> None:
    pedido_service.clear_pedidos()
    stats = pedido_service.get_stats()

    assert stats.total == 0
    assert stats.estados.abiertos == 0
    assert stats.estados.en_proceso == 0
    assert stats.estados.cerrados == 0
    assert stats.por_sector == {}
    assert stats.por_taller == {}


def test_create_pedido_uses_next_id(pedido_service: PedidoService) -> None:
    created = pedido_service.create_pedido(_payload())

    assert created.id == 80008
    assert created.estado == "abierto"
    assert pedido_service.get_pedido(80008) is not None


def test_create_pedido_on_empty_collection_starts_at_one(pedido_service: PedidoService) -> None:
    pedido_service.clear_pedidos()

    assert pedido_service.create_pedido(_payload()).id == 1


def test_create_after_deleting_top_id_follows_surviving_max(
    pedido_service: PedidoService,
) -> None:
    assert pedido_service.delete_pedido(80007) is True

    assert pedido_service.create_pedido(_payload()).id == 80007


def test_update_pedido_keeps_id_and_unset_fields(pedido_service: PedidoService) -> None:
    updated = pedido_service.update_pedido(
        80002, PedidoUpdateRequest(problema="Cable pelado", estado="cerrado")
    )

    assert updated is not None
    assert updated.id == 80002
    assert updated.problema == "Cable pelado"
    assert updated.estado == "cerrado"
    assert updated.nombre == "María González"


def test_update_and_delete_unknown_pedido(pedido_service: PedidoService) -> None:
    assert pedido_service.update_pedido(1, PedidoUpdateRequest(estado="cerrado")) is None
    assert pedido_service.delete_pedido(1) is False
    assert len(pedido_service.list_pedidos()) == 7


def test_change_estado(pedido_service: PedidoService) -> None:
    changed = pedido_service.change_estado(80001, "proceso")

    assert changed is not None
    assert changed.estado == "proceso"
    assert pedido_service.get_stats().estados.en_proceso == 3
    assert pedido_service.change_estado(1, "cerrado") is None


def test_search_by_text_is_case_insensitive(pedido_service: PedidoService) -> None:
    by_name = pedido_service.search_pedidos(PedidoSearch(search_term="juan"))
    assert [pedido.id for pedido in by_name] == [80001]

    by_legajo = pedido_service.search_pedidos(PedidoSearch(search_term="lp00"))
    assert len(by_legajo) == 7

    by_sub_equipo = pedido_service.search_pedidos(PedidoSearch(search_term="CABEZAL"))
    assert [pedido.id for pedido in by_sub_equipo] == [80001, 80006]


def test_search_combines_filters(pedido_service: PedidoService) -> None:
    results = pedido_service.search_pedidos(
        PedidoSearch(sector="corrugadora", taller="mecanico", estado="abierto")
    )
    assert [pedido.id for pedido in results] == [80001]

    ranged = pedido_service.search_pedidos(
        PedidoSearch(fecha_desde=date(2024, 1, 14), fecha_hasta=date(2024, 1, 14))
    )
    assert [pedido.id for pedido in ranged] == [80004, 80005]

    assert len(pedido_service.search_pedidos(PedidoSearch())) == 7


def test_export_clear_import_restores_collection(pedido_service: PedidoService) -> None:
    original = pedido_service.list_pedidos()
    exported = pedido_service.export_pedidos()

    pedido_service.clear_pedidos()
    assert pedido_service.list_pedidos() == []

    assert pedido_service.import_pedidos(exported) is True
    assert pedido_service.list_pedidos() == original


def test_export_is_indented_json(pedido_service: PedidoService) -> None:
    exported = pedido_service.export_pedidos()

    assert exported.startswith("[\n  {")
    records = json.loads(exported)
    assert records[0]["id"] == 80001
    assert records[0]["fecha"] == "2024-01-15"


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        '{"id": 1}',
        '[{"id": 1, "nombre": "Incomplete"}]',
    ],
)
def test_rejected_import_leaves_collection_untouched(
    pedido_service: PedidoService, content: str
) -> None:
    before = pedido_service.list_pedidos()

    assert pedido_service.import_pedidos(content) is False
    assert pedido_service.list_pedidos() == before


def test_restore_sample_data_replaces_collection(pedido_service: PedidoService) -> None:
    pedido_service.clear_pedidos()
    pedido_service.create_pedido(_payload())

    pedido_service.restore_sample_data()

    assert [pedido.id for pedido in pedido_service.list_pedidos()] == list(range(80001, 80008))


def test_concurrent_creates_get_distinct_ids(pedido_service: PedidoService) -> None:
    with ThreadPoolExecutor(max_workers=8) as pool:
        created = list(pool.map(lambda _: pedido_service.create_pedido(_payload()), range(400)))

    ids = [pedido.id for pedido in created]
    assert len(set(ids)) == 400
    assert sorted(ids) == list(range(80008, 80408))
    assert len(pedido_service.list_pedidos()) == 407
