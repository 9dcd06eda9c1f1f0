# dodgerun

The building blocks of a small lane-dodging arcade game. The package
provides vectors and transforms, box and sphere colliders, frame-by-frame
input state, a camera, a particle system, and banks that hold images,
models and sounds behind integer handles.

## Installing

```
pip install .
```

This also installs `pillow`, which reads image sizes, and `pygame`. Sounds
play through `pygame.mixer` only when your program has already initialised
the mixer.

## Modules

- `dodgerun.math3d`: `Vec3`, a mutable vector with `+`, `-`, `length()`
  and `copy()`, and `Transform`, which holds position, rotation in degrees,
  scale and an optional parent.
- `dodgerun.colliders`: `BoxCollider` and `SphereCollider`, with their
  `is_hit` method and the functions `hit_box_vs_box`, `hit_box_vs_sphere`
  and `hit_sphere_vs_sphere`. A collider's `game_object` can be any object
  that has a `world_position()` method returning a `Vec3`.
- `dodgerun.controls`: `InputState`. Call `update(keys=..., mouse_buttons=...,
  mouse_move=..., pads=...)` once per frame. It then answers `is_key`,
  `is_key_down` and `is_key_up`, the matching mouse and pad queries, stick
  and trigger values with dead zones applied, and `analog_value`. The keys
  the game uses are in `Key`.
- `dodgerun.camera`: `Camera`, a left-handed perspective camera. Call
  `update()` after `set_position` or `set_target` to rebuild
  `view_matrix` and `billboard_matrix`.
- `dodgerun.vfx`: `ParticleSystem`, driven by `EmitterData`. It has
  `start`, `end`, `update` and `release`, and exposes `emitters` and
  `particles`.
- `dodgerun.images`: `ImageBank`, which holds images by handle and
  supports clip rectangles (`Rect`), alpha from 0 to 255, and transforms.
  `draw` passes the slot to an optional renderer callback.
- `dodgerun.text`: `Text`, a bitmap-font writer on top of `ImageBank`.
  `draw` returns the list of glyphs it placed.
- `dodgerun.models`: `ModelBank`, which holds models by handle and
  animates them frame by frame (`set_anim_frame`, `anim_frame`).
- `dodgerun.audio`: `parse_wave` reads RIFF/WAVE data. `AudioBank` loads
  WAV files by handle and plays each sound on a fixed number of voices.
- `dodgerun.debuglog`: `format_value` and `log`, which write to standard
  error.
- `dodgerun.context`: `GameContext`, which bundles the camera, input,
  banks, particle system and a random generator for one game.

## Example

```python
import random

from dodgerun.colliders import SphereCollider
from dodgerun.controls import InputState, Key
from dodgerun.math3d import Vec3
from dodgerun.vfx import EmitterData, ParticleSystem

class Body:
    def __init__(self, position):
        self.position = position
    def world_position(self):
        return self.position

a = SphereCollider(Vec3(), 0.5)
a.game_object = Body(Vec3(0, 0, 0))
b = SphereCollider(Vec3(), 0.5)
b.game_object = Body(Vec3(0.8, 0, 0))
assert a.is_hit(b)

state = InputState()
state.update(keys=[Key.SPACE])
assert state.is_key_down(Key.SPACE)

particles = ParticleSystem(random.Random(1))
particles.start(EmitterData(delay=0, number=5))
particles.update()
assert len(particles.particles) == 5
```

## What it does not do

The package does not contain a playable game. It has no command to run, no
window or main loop, no game-object tree and no scenes (title, play, game
over). It also does not draw anything itself. `ImageBank` and `ModelBank`
only keep track of state and call a renderer you supply, and the default
`ModelBank` loader only checks that the file exists. It does not parse
model files.

## Tests

```
pip install .[test]
pytest
```