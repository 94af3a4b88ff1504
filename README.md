# zombieufo

A small side-scrolling arcade game built on pygame. You play a zombie
walking along the ground of a scrolling world. A UFO boss hovers overhead,
follows you sideways, and launches bugs at you. Shoot it five times to win.

## Installing

```
pip install .
```

## Playing

```
zombieufo
zombieufo --spec path/to/game.xml --sound-dir path/to/sounds
```

Options:

- `--spec` – the game specification XML file (default `xmlSpec/game.xml`).
- `--sound-dir` – the directory holding `music.wav` and the effect files
  (default `sound`).

The specification sets the world and view sizes, the window title, the
sprite images (`<name>/file`, `<name>/frames`, ...), speeds, gravity, the
font, the HUD panels, frame-capture settings and so on. Image paths in it
are read relative to the working directory. If the music file cannot be
loaded the game stops with an error; missing effect files are simply not
played. Errors while starting or running are printed and the command exits
with status 1.

### Controls

| Key        | Action                                  |
|------------|-----------------------------------------|
| Left       | move left                               |
| Right      | move right                              |
| Space      | jump (again in mid-air, a few times)    |
| S          | shoot                                   |
| G          | toggle god mode (bugs cannot hurt you)  |
| P          | pause / unpause                         |
| R          | restart                                 |
| F1         | show / hide the heads-up display        |
| F4         | toggle frame capture                    |
| Esc, Q     | quit                                    |

Bugs are launched from the UFO towards where you stand, in bursts that
alternate with quiet spells. If one hits you, you explode and come back
80 frames later. When the UFO's hit points run out it explodes, the HUD
tells you that you have won, and R starts a new round.

Frame capture is on when the game starts: each rendered frame is saved as
`frames/<username>.NNNN.bmp` until the `maxFrames` limit from the
specification is passed. Press F4 to turn it off.

## Using the pieces

The modules can also be used on their own:

- `zombieufo.vector2f.Vector2f` – a mutable 2-D float vector with
  arithmetic, `magnitude`, `normalize` and `dot`.
- `zombieufo.xmlspec.parse_xml_string` / `parse_xml_file` – flatten an XML
  document into a `{"path/to/tag": "value"}` mapping (attributes become
  `path/to/tag/attr`); errors raise `XmlSpecError`.
- `zombieufo.gamedata.Gamedata` – typed lookups (`get_int`, `get_float`,
  `get_bool`, `get_str`, `has_tag`) and random helpers over such a mapping;
  missing tags raise `GamedataError`.
- `zombieufo.clock.Clock` – millisecond game clock with pause, frame
  capping and FPS averaging.
- `zombieufo.frame` – `Frame`, `SpriteSheet` and `crop_surface`.
- `zombieufo.collision` – rectangular, mid-point and per-pixel collision
  strategies.
- `zombieufo.sprites`, `zombieufo.particles`, `zombieufo.player`,
  `zombieufo.bulletpool` – the sprites, bullets and explosions.
- `zombieufo.sound.SoundBoard` – music and the `Effect` sound effects.

## What is not included

The package contains code only: it ships no specification file, images,
font or sounds. The game needs these to be supplied by you and will not
start without them.

## Running the tests

```
pip install .[test]
pytest
```