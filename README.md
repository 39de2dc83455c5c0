# officebeat

A small rhythm game built on pygame. Beats scroll from the right side of the
screen toward the judge ring in the lower-left corner. Press the space bar as a
beat passes through the ring to have it judged, and use the arrow keys to make
the office boss strike a pose.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

Start the game from a directory that holds the game's `assets/` folder:

```
officebeat
```

The command takes no options beyond `--help`. It opens a 900 × 672 window at
the top-left corner of the screen and runs at 60 frames per second.

- **Enter** on the title screen starts the game.
- **Space** hits the beat that is passing through the judge ring; the ring
  darkens while the key is held. How close the beat is to the centre of the
  ring decides the judgement, printed to the console: `Perfect`, `Good` or
  `Ok`, and the beat disappears. A beat that reaches the left edge of the
  screen without being judged is reported as `Bad`.
- **Up / Down / Left / Right** switch the boss to the matching pose while the
  key is held and for about two seconds after, with a star shown at a spot
  beside him for the same time.
- Closing the window ends the game.

The beat chart is fixed: three beats are on screen from the start, and more
are released at set ticks of the game clock. The song starts when the game
scene is first drawn and starts again whenever it has finished.

### Asset layout

The game loads its media from paths relative to the working directory:

```
assets/
  font/pirulen.ttf
  image/icon.jpg          (optional window icon)
  image/office.jpg
  image/boss_normal.png
  image/boss_top.png
  image/boss_buttom.png
  image/boss_left.png
  image/boss_right.png
  image/star.png
  sound/bokuwa.mp3        (loaded only when the sound mixer is available)
```

The side-scrolling elements (`Character`, `Projectile`, `Floor`, `Teleport`,
`Tree`) read, when no images are handed to them, `image/chara_stop.gif`,
`image/chara_move.gif`, `image/chara_attack.gif`, `image/projectile.png`,
`image/floor.png`, `image/teleport.png`, `image/tree.png`,
`sound/atk_sound.wav` and `map/gamescene_map.txt`.

## Using the pieces

The building blocks can be used on their own.

- `officebeat.shapes` provides `Point`, `Rectangle` and `Circle` hitboxes with
  `overlap`, `shift`, `center_x` and `center_y`, plus `check_overlap` for any
  pair of shapes (it raises `GameError` for anything that is not a shape).
- `officebeat.scene.Scene` keeps elements grouped by their `EleType` label;
  `register`, `remove`, `all_elements` and `label_elements` manage them, and
  `update` runs every element's update, then its interactions, then drops the
  elements marked as expired. A scene holds at most 100 elements.
- `officebeat.element.Element` is the base class for anything placed in a
  scene: override `update`, `interact`, `draw` and `destroy`.
- `officebeat.gif` is a pure-Python GIF decoder: `load_raw` parses a GIF
  stream into a `GifAnimation`, `lzw_decode` and `deinterlace` work on a
  `GifBitmap`, `render_frame` draws a frame onto an RGBA byte canvas, and
  `new_gif` loads an animation ready for timed playback with
  `GifAnimation.frame_at`. Bad data raises `GifError`.
- `officebeat.settings.InputState` tracks which keys and mouse buttons are
  held and where the mouse is.
- `officebeat.game.Game` owns the window and the current scene;
  `create_scene` builds the title menu or the game scene.

```python
from officebeat.shapes import Circle, Rectangle

ring = Circle(85, 580, 30)
box = Rectangle(100, 560, 140, 600)
print(ring.overlap(box))
```

## What it does not do

- No score is kept or shown: each judgement is only printed to the console.
- The title screen plays no music.
- The side-scrolling elements (`Character`, `Projectile`, `Floor`, `Teleport`,
  `Tree`) are not placed in the game scene; they are available only for
  building scenes of your own.
- There is no way to leave the game scene other than closing the window.