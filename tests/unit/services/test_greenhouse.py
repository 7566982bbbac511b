"""
Tests for Greenhouse.

Covers:
- Shipments: sequential IDs, round-robin colours, one aggregate Added event
- Membership management
- tick_all event emission, ordering and deferred removal
- apply_care
- Snapshot iteration
"""

from __future__ import annotations

from unittest.mock import MagicMock

from nursery.domain.plant_states import DEAD, GROWING, MATURE, SEEDLING, WILTING
from nursery.enums.common import CareAction, InventoryStatus
from nursery.enums.events import PlantEventKind, StockEventKind
from nursery.services.application.service_subject import NurseryObserver


class RecordingObserver(NurseryObserver):
    def __init__(self, name, journal):
        self.name = name
        self.journal = journal

    def on_plant_event(self, event):
        self.journal.append((self.name, event.plant_id, event.kind))


def _levels(plant, moisture, insecticide, health):
    plant.add_water(moisture - plant.moisture)
    plant.add_insecticide(insecticide - plant.insecticide)
    plant.add_health(health - plant.health)


def _ready_to_mature(greenhouse, clock, sku="DES-1"):
    plant_id = greenhouse.receive_shipment(sku, 1)[0]
    plant = greenhouse.get_plant(plant_id)
    plant.set_state(GROWING)
    _levels(plant, 50, 50, 100)
    clock.advance_days(10)
    return plant


class TestReceiveShipment:
    def test_ids_and_colours(self, greenhouse):
        ids = greenhouse.receive_shipment("DES-1", 3)
        assert ids == ["DES-1#1", "DES-1#2", "DES-1#3"]
        colours = [greenhouse.get_plant(i).colour for i in ids]
        assert colours == ["Red", "Yellow", "Purple"]

    def test_sequence_is_per_sku_and_colours_continue(self, greenhouse):
        greenhouse.receive_shipment("DES-1", 2)
        ids = greenhouse.receive_shipment("TRO-1", 1)
        assert ids == ["TRO-1#1"]
        assert greenhouse.get_plant("TRO-1#1").colour == "Purple"
        greenhouse.remove_plant("DES-1#2")
        assert greenhouse.receive_shipment("DES-1", 1) == ["DES-1#3"]

    def test_emits_one_aggregate_event(self, greenhouse):
        observer = MagicMock()
        greenhouse.attach(observer)
        greenhouse.receive_shipment("WET-1", 4)
        observer.on_stock_event.assert_called_once()
        event = observer.on_stock_event.call_args.args[0]
        assert event.kind == StockEventKind.ADDED
        assert event.key == "WET-1"
        assert event.quantity == 4

    def test_unknown_sku_is_a_noop(self, greenhouse):
        observer = MagicMock()
        greenhouse.attach(observer)
        assert greenhouse.receive_shipment("NOPE", 3) == []
        assert len(greenhouse) == 0
        observer.on_stock_event.assert_not_called()

    def test_clones_are_fresh_seedlings(self, greenhouse):
        plant = greenhouse.get_plant(greenhouse.receive_shipment("IND-1", 1)[0])
        assert plant.state is SEEDLING
        assert (plant.moisture, plant.health, plant.insecticide) == (0, 100, 100)


class TestMembership:
    def test_add_plant_emits_nothing(self, greenhouse, make_plant, desert_species):
        observer = MagicMock()
        greenhouse.attach(observer)
        assert greenhouse.add_plant(make_plant(desert_species, "DES-1#99")) is True
        assert greenhouse.add_plant(make_plant(desert_species, "DES-1#99")) is False
        assert observer.method_calls == []

    def test_lookups(self, greenhouse):
        greenhouse.receive_shipment("DES-1", 2)
        greenhouse.receive_shipment("TRO-1", 1)
        assert greenhouse.count_by_sku("DES-1") == 2
        assert greenhouse.count_by_sku("NOPE") == 0
        assert greenhouse.plant_ids_for_sku("DES-1") == {"DES-1#1", "DES-1#2"}
        assert greenhouse.species_of("TRO-1#1") == "TRO-1"
        assert greenhouse.species_of("NOPE#1") is None
        assert greenhouse.get_plant("NOPE#1") is None

    def test_remove(self, greenhouse):
        greenhouse.receive_shipment("DES-1", 1)
        assert greenhouse.remove_plant("DES-1#1").plant_id == "DES-1#1"
        assert greenhouse.remove_plant("DES-1#1") is None
        assert "DES-1#1" not in greenhouse


class TestTickAll:
    def test_fan_out_in_registration_order(self, greenhouse, clock):
        journal = []
        greenhouse.attach(RecordingObserver("first", journal))
        greenhouse.attach(RecordingObserver("second", journal))
        plant = _ready_to_mature(greenhouse, clock)

        greenhouse.tick_all()

        assert journal == [
            ("first", plant.plant_id, PlantEventKind.MATURED),
            ("second", plant.plant_id, PlantEventKind.MATURED),
        ]

    def test_no_event_without_transition(self, greenhouse):
        observer = MagicMock()
        greenhouse.receive_shipment("DES-1", 2)
        greenhouse.attach(observer)
        assert greenhouse.tick_all() == []
        observer.on_plant_event.assert_not_called()

    def test_wilted_event(self, greenhouse):
        plant = greenhouse.get_plant(greenhouse.receive_shipment("DES-1", 1)[0])
        plant.set_state(MATURE)
        _levels(plant, 0, 100, 55)
        events = greenhouse.tick_all()
        assert [e.kind for e in events] == [PlantEventKind.WILTED]
        assert plant.state is WILTING

    def test_dead_plants_removed_after_full_pass(self, greenhouse):
        ids = greenhouse.receive_shipment("DES-1", 3)
        for plant_id in (ids[0], ids[1]):
            _levels(greenhouse.get_plant(plant_id), 0, 0, 3)
        survivor = greenhouse.get_plant(ids[2])

        events = greenhouse.tick_all()

        assert [(e.plant_id, e.kind) for e in events] == [
            (ids[0], PlantEventKind.DIED),
            (ids[1], PlantEventKind.DIED),
        ]
        assert len(greenhouse) == 1
        # the survivor was still checked in the same pass
        assert survivor.insecticide == 99

    def test_already_dead_plant_reports_died(self, greenhouse):
        plant = greenhouse.get_plant(greenhouse.receive_shipment("DES-1", 1)[0])
        plant.add_health(-100)
        events = greenhouse.tick_all()
        assert [e.kind for e in events] == [PlantEventKind.DIED]
        assert len(greenhouse) == 0

    def test_failing_observer_does_not_block_others(self, greenhouse, clock):
        journal = []
        broken = MagicMock()
        broken.on_plant_event.side_effect = RuntimeError("boom")
        greenhouse.attach(broken)
        greenhouse.attach(RecordingObserver("ok", journal))
        _ready_to_mature(greenhouse, clock)

        greenhouse.tick_all()

        assert len(journal) == 1
        assert greenhouse.event_bus.get_metrics()["failed_deliveries"] == 1

    def test_inventory_follows_lifecycle(self, wired_greenhouse, inventory, clock):
        plant = _ready_to_mature(wired_greenhouse, clock)
        wired_greenhouse.tick_all()
        assert inventory.status_of(plant.plant_id) == InventoryStatus.AVAILABLE
        assert inventory.available_count("DES-1") == 1

        _levels(plant, 0, 100, 55)
        wired_greenhouse.tick_all()
        assert inventory.status_of(plant.plant_id) == InventoryStatus.WILTED
        assert inventory.available_count("DES-1") == 0

        plant.add_health(-100)
        wired_greenhouse.tick_all()
        assert inventory.status_of(plant.plant_id) == InventoryStatus.DEAD


class TestObserverRegistration:
    def test_none_and_duplicates_are_ignored(self, greenhouse, clock):
        observer = MagicMock()
        assert greenhouse.attach(None) is False
        assert greenhouse.attach(observer) is True
        assert greenhouse.attach(observer) is False
        _ready_to_mature(greenhouse, clock)
        greenhouse.tick_all()
        assert observer.on_plant_event.call_count == 1

    def test_detach(self, greenhouse, clock):
        observer = MagicMock()
        greenhouse.attach(observer)
        assert greenhouse.detach(observer) is True
        assert greenhouse.detach(observer) is False
        _ready_to_mature(greenhouse, clock)
        greenhouse.tick_all()
        observer.on_plant_event.assert_not_called()

    def test_late_observer_misses_earlier_events(self, greenhouse, clock):
        _ready_to_mature(greenhouse, clock)
        greenhouse.tick_all()
        observer = MagicMock()
        greenhouse.attach(observer)
        greenhouse.tick_all()
        observer.on_plant_event.assert_not_called()


class TestApplyCare:
    def test_care_then_check(self, greenhouse):
        plant = greenhouse.get_plant(greenhouse.receive_shipment("DES-1", 1)[0])
        state = greenhouse.apply_care(plant, CareAction.WATER)
        assert state is SEEDLING
        # +15 from watering, -1 from the seedling check
        assert plant.moisture == 14

    def test_recovery_emits_matured(self, greenhouse):
        observer = MagicMock()
        greenhouse.attach(observer)
        plant = greenhouse.get_plant(greenhouse.receive_shipment("DES-1", 1)[0])
        plant.set_state(WILTING)
        _levels(plant, 70, 70, 60)
        greenhouse.apply_care(plant, "water")
        assert plant.state is MATURE
        assert observer.on_plant_event.call_args.args[0].kind == PlantEventKind.MATURED

    def test_fatal_care_removes_plant(self, greenhouse):
        plant = greenhouse.get_plant(greenhouse.receive_shipment("DES-1", 1)[0])
        _levels(plant, 95, 100, 5)
        state = greenhouse.apply_care(plant, CareAction.WATER)
        assert state is DEAD
        assert plant.plant_id not in greenhouse

    def test_dead_plant_untouched(self, greenhouse, make_plant, desert_species):
        plant = make_plant(desert_species)
        plant.add_health(-100)
        greenhouse.apply_care(plant, CareAction.WATER)
        assert plant.moisture == 0


class TestIteration:
    def test_filters(self, greenhouse):
        greenhouse.receive_shipment("DES-1", 2)
        greenhouse.receive_shipment("TRO-1", 1)
        greenhouse.get_plant("DES-1#2").set_state(GROWING)
        assert greenhouse.iterate().count() == 3
        assert greenhouse.iterate_by_state(GROWING).ids() == ["DES-1#2"]
        assert greenhouse.iterate_by_sku("DES-1").count() == 2

    def test_mutation_during_traversal(self, greenhouse):
        greenhouse.receive_shipment("DES-1", 3)
        visited = []
        for plant in greenhouse.iterate():
            visited.append(plant.plant_id)
            greenhouse.remove_plant(plant.plant_id)
        assert len(visited) == 3
        assert len(greenhouse) == 0
