# shooter

A small top-down game made with pygame. It opens an 800×600 window on a
title screen; releasing Enter switches to the playing field. There you
move a player around a field of five walls placed at random, and the
camera keeps the player in the centre of the window.

## Installing

```
pip install .
```

The game needs pygame. It loads its resources relative to the directory
you start it from:

| File                       | Used for          |
|----------------------------|-------------------|
| `res/textures/player.png`  | the player        |
| `res/textures/wall.png`    | the walls         |
| `res/fonts/thinPix.ttf`    | the title screen  |

## Playing

```
shooter
```

| Key   | Action                     |
|-------|----------------------------|
| Enter | start the game (on release)|
| W     | move up                    |
| S     | move down                  |
| A     | move left                  |
| D     | move right                 |

The player moves at 100 units per second. Sprites are drawn in order of
their lower edge, so those further down the screen appear in front.
Close the window to quit.

## What the game does not do

There is no shooting yet: `shooter.factory.BulletBlueprint` records a
bullet's parent, position, rotation, speed and texture name, but
`get_entity()` returns a bare `Entity` with no components. There is also
no collision between the player and the walls, no enemies, no score and
no sound playback; the sound container in `ResourceManager` is there
but nothing uses it.

## Using the pieces

The game is put together from small parts that can also be used on
their own:

- `shooter.attributes`: `AttributeManager` stores one attribute of each
  type for an entity (`TransformAttribute`, `VelocityAttribute`,
  `DirectionAttribute`, `SpriteAttribute`, `AnimationAttribute`). Adding
  a type twice raises `ValueError`; fetching a missing one raises
  `KeyError`.
- `shooter.components`: behaviour attached to an entity:
  `TransformComponent`, `MovementComponent`, `InputComponent`,
  `RenderComponent`, `CameraComponent`, `AnimationComponent` and
  `BehaviourTreeComponent`, all subclasses of `Component`.
- `shooter.commands`: `Command` and `MoveCommand`, run by an
  `InputComponent` while their input is held.
- `shooter.entity`: `Entity` holds components; `EntityManager` updates
  entities and drops those marked with `destroy()`.
- `shooter.factory`: `EntityFactory` builds the player and static
  objects; `Entities` sets up and draws a whole scene.
- `shooter.events`: `EventChannel` for publish and subscribe by event
  type.
- `shooter.behaviour`: behaviour-tree nodes `Selector` and `Sequence`,
  returning a `Status`.
- `shooter.animator`: `Animator` picks frames from a sprite sheet
  described by `AnimationInfo`.
- `shooter.camera`: `Camera`, a view given by its centre and size.
- `shooter.input`: `InputHandler` maps input names to key, mouse-button
  or custom queries.
- `shooter.resources`: `ResourceContainer` loads each resource once;
  `ResourceManager` holds the texture, font and sound containers.
- `shooter.sprites`: `Sprite` and `SpriteSortRenderer`.
- `shooter.states`: `StateMachine` with `MenuState` and `GameState`.
- `shooter.app`: `Application`, the window and main loop, and `main()`.

A behaviour tree:

```python
from shooter.behaviour import Node, Selector, Status

class Succeed(Node):
    def process(self):
        return Status.SUCCESS

root = Selector()
root.add_child_node(Succeed)
assert root.process() is Status.SUCCESS
```

An event channel takes the event types it carries when it is made:

```python
from dataclasses import dataclass
from shooter.events import EventChannel

@dataclass
class Hit:
    damage: int

seen = []
channel = EventChannel(Hit)
channel.subscribe(Hit, seen.append)
channel.publish(Hit(3))
assert seen == [Hit(3)]
```

## Running the tests

```
pip install ".[test]"
pytest
```