import pygame
import pytest

from shooter.attributes import TransformAttribute
from shooter.components import Component, RenderComponent, TransformComponent
from shooter.entity import Entity, EntityManager
from shooter.resources import ResourceContainer
from shooter.sprites import SpriteSortRenderer


class Recorder(Component):
    def __init__(self, log, name="c"):
        self.log = log
        self.name = name
        self.attributes = None
        self.event_manager = None

    def init_attributes(self, attributes):
        self.attributes = attributes
        self.log.append(("init", self.name))

    def init_entity_event_manager(self, event_manager):
        self.event_manager = event_manager

    def fetch_attributes(self, attributes):
        self.log.append(("fetch", self.name))

    def update(self, delta_time):
        self.log.append(("update", self.name, delta_time))


@pytest.fixture
def textures():
    return ResourceContainer("", lambda path: pygame.Surface((8, 8)))


def test_add_component_constructs_and_initialises():
    log = []
    entity = Entity()
    component = entity.add_component(Recorder, log, name="first")
    assert isinstance(component, Recorder)
    assert component.name == "first"
    assert component.attributes is entity.attributes
    assert component.event_manager is entity.event_manager
    assert log == [("init", "first")]
    assert entity.components == (component,)


def test_init_components_fetches_in_order():
    log = []
    entity = Entity()
    entity.add_component(Recorder, log, "a")
    entity.add_component(Recorder, log, "b")
    log.clear()
    entity.init_components()
    assert log == [("fetch", "a"), ("fetch", "b")]


def test_update_runs_components_in_order():
    log = []
    entity = Entity()
    entity.add_component(Recorder, log, "a")
    entity.add_component(Recorder, log, "b")
    log.clear()
    entity.update(0.25)
    assert log == [("update", "a", 0.25), ("update", "b", 0.25)]


def test_destroy_marks_entity():
    entity = Entity()
    assert entity.should_destroy is False
    entity.destroy()
    assert entity.should_destroy is True


def test_components_share_attributes():
    entity = Entity()
    entity.add_component(TransformComponent, 3.0, 4.0)
    transform = entity.attributes.get_attribute(TransformAttribute)
    assert tuple(transform.position) == (3.0, 4.0)


def test_manager_add_entity_initialises_components():
    log = []
    entity = Entity()
    entity.add_component(Recorder, log, "a")
    manager = EntityManager()
    manager.add_entity(entity)
    assert ("fetch", "a") in log
    assert manager.entities == (entity,)
    assert len(manager) == 1


def test_manager_updates_live_and_removes_destroyed():
    live_log, dead_log = [], []
    live, dead = Entity(), Entity()
    live.add_component(Recorder, live_log, "live")
    dead.add_component(Recorder, dead_log, "dead")
    manager = EntityManager()
    manager.add_entity(dead)
    manager.add_entity(live)
    dead.destroy()
    manager.update(0.5)
    assert ("update", "live", 0.5) in live_log
    assert not any(entry[0] == "update" for entry in dead_log)
    assert list(manager) == [live]


def test_removed_entity_stops_drawing_its_sprite(textures):
    renderer = SpriteSortRenderer()
    entity = Entity()
    entity.add_component(RenderComponent, "thing.png", renderer, textures)
    manager = EntityManager()
    manager.add_entity(entity)
    assert len(renderer) == 1
    entity.destroy()
    manager.update(0.1)
    assert len(renderer) == 0
    assert len(manager) == 0