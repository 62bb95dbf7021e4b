# flow

Small building blocks for games and other interactive applications, using
nothing outside the Python standard library (Python 3.10 or later). The
package has three parts:

- `flow.ds`: containers suited to game loops
- `flow.glm`: vectors, rectangles, colours, matrices and quaternions
- `flow.asset`: an asset server that loads files on background threads and
  hands out handles

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Containers (`flow.ds`)

| Module | What it holds |
| --- | --- |
| `flow.ds.arraymap` | `ArrayMap`: a map kept in a flat list in insertion order. Iteration is fast and lookups are linear. `delete` moves the last entry into the freed slot. |
| `flow.ds.indexmap` | `IndexMap`: a map from non-negative integers to values, backed by a list that grows to fit the largest key. `put` ignores negative keys, `items()` goes in key order, and `delete` raises `IndexError` for a key outside the storage. |
| `flow.ds.minislice` | `MiniSlice(capacity=8)`: a sequence whose first `capacity` elements (1 to 16) live in a fixed block and the rest in an overflow list. `delete` swaps the last element into the hole and ignores out-of-range indices. |
| `flow.ds.slices` | `grow_add(seq, index, value)` sets an index, padding the list with `None` as needed; `safe_get(seq, index, default)` reads without going out of bounds. |
| `flow.ds.stack` | `Stack`: last in, first out; `remove` raises `IndexError` when empty. |
| `flow.ds.queue` | `Queue`: a circular first-in, first-out queue that doubles its storage when full. `fixed_queue(length)` builds one that raises `QueueFullError` instead. `peek`, `peek_last` and `remove` raise `IndexError` when empty. |
| `flow.ds.ringbuffer` | `RingBuffer(length)`: a fixed-size buffer that overwrites its oldest entries. `remove()` returns `(value, advanced)`. |
| `flow.ds.priority` | `PriorityQueue` of `Item(value, priority)` objects, with `update` and `remove` for items already queued, and `PriorityMap`, a keyed priority queue. Higher priorities come out first. |

```python
from flow.ds.arraymap import ArrayMap
from flow.ds.priority import PriorityMap

m = ArrayMap()
m.put(100, "a hundred")
m.put(50, "fifty")
print(m.get(50, None))        # fifty
for key, value in m.items():
    print(key, value)         # 100 first, then 50

jobs = PriorityMap()
jobs.put("render", "draw frame", 2)
jobs.put("physics", "step world", 5)
jobs.put("render", "draw frame", 9)   # same key: value and priority replaced
print(jobs.pop())             # ('render', 'draw frame', 9)
```

`PriorityMap.get` and `PriorityMap.remove` raise `KeyError` for a missing
key, and `PriorityMap.pop` raises `KeyError` when the map is empty.

## Math (`flow.glm`)

- `flow.glm.vec`: immutable `Vec2`, `Vec3`, `Vec4` and `IVec2`, plus `v2`,
  `angle` (the signed angle from one 2D vector to another, in `(-pi, pi]`)
  and `clamp(low, high, value)`.
- `flow.glm.rect`: `Rect` and `Box`, with `r(min_x, min_y, max_x, max_y)` and
  `cr(radius)` to build rectangles. Rectangles can be fitted, anchored,
  padded, sliced, scaled and unioned, which suits UI layout. The `cut_*`
  methods shrink the rectangle in place and return the piece cut off; every
  other method returns a new rectangle.
- `flow.glm.color`: premultiplied `RGBA` colours, the constants `WHITE` and
  `BLACK`, and constructors `from_uint8`, `from_rgba`, `from_nrgba`,
  `hex_color`, `alpha`, `greyscale` and `from_straight_rgba`.
- `flow.glm.line`: `Line2` with a segment intersection test.
- `flow.glm.matrix`: column-major `Mat3` and `Mat4` whose transform methods
  change the matrix in place and return it, and `Quat` rotations
  (`quat_rotate`, `quat_z`). `Mat4.inv()` returns a new matrix, or a zero
  matrix when the input is singular.

```python
from flow.glm.vec import v2, angle
from flow.glm.rect import r
from flow.glm.matrix import Mat4

screen = r(0, 0, 1920, 1080)
sprite = r(0, 0, 320, 180)
print(sprite.fit_int(screen))          # scaled by a whole number, centred on screen

left = screen.left_half()
print(left.pad_all(-10).center())

print(angle(v2(0, 1), v2(1, 0)))       # a quarter turn, in radians

m = Mat4.identity()
m.translate(-100, -200, 0).scale(0.5, 0.5, 1).translate(200, 300, 0)
print(m.inv().apply(m.apply(sprite.box().max)))
```

## Assets (`flow.asset`)

`flow.asset.server` provides a `Server` that maps name prefixes to
`Filesystem` directories and file extensions to `Loader` objects. A loader
says which extensions it handles and how to turn bytes into a value and back:

```python
import json

from flow.asset.server import Filesystem, Loader, Server


class SettingsLoader(Loader):
    def extensions(self):
        return [".settings.json"]

    def load(self, server, data):
        return json.loads(data)

    def store(self, server, value):
        return json.dumps(value).encode()


server = Server()
server.register(SettingsLoader())
server.register_filesystem("assets/", Filesystem("path/to/assets"))

handle = server.load("assets/game.settings.json")   # returns at once
settings = handle.get()                             # waits for the load
```

- `Server.load(name)` starts loading on a background thread and returns a
  `Handle` straight away; loading the same name again returns the same
  handle.
- `Server.load_dir(path, recursive=False)` loads every file in a directory in
  name order, and returns an empty list for an unknown prefix or an
  unreadable directory.
- `Server.reload(handle)` reloads the file in the background if its
  modification time has changed, and returns the worker thread (or `None`
  while the handle is still loading).
- `Server.store(handle)` writes the handle's value back through its loader.
- `Server.read_raw(name)` returns a `RawData(data, mod_time)`; names starting
  with `http://` or `https://` are fetched over HTTP, others are read from
  the registered filesystem whose prefix they start with.
  `Server.write_raw(name, data)` writes a file, creating directories.

A `Handle` has `get()`, which waits and then returns the value or raises the
exception that stopped the load, `wait(timeout=None)`, and the properties
`done`, `value`, `error` and `generation` (how many times a value has been
stored). Configuration mistakes, such as a missing loader for an extension,
a duplicate loader or prefix, an unknown prefix, or storing a handle with no
value, raise `AssetError`.

`get_extension` shows which extension a name maps to: everything from the
first dot of the last path segment, so `"maps/level.settings.json"` gives
`".settings.json"`.

## What it does not do

`flow` has no application loop, system scheduler, windowing, rendering or
audio playback; it supplies the containers, math and asset loading such
things would be built on. The asset server has no built-in loaders, and it
does not watch files for changes: reloading happens only when
`Server.reload` is called.