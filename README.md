# vopix

Building blocks of a small voxel game engine, in plain Python with no
third-party dependencies: vector and matrix math, a typed trie, a doubly
linked list, a level-filtered logger, a frame-rate counter, JSON helpers,
the geometry and batching of 2D interface elements, and bounding boxes of
voxel models.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `vopix.vector`

`Vector3` is a frozen dataclass with `x`, `y`, `z` (default 0). It supports
`+`, `-`, unary `-` and iteration, and has `scaled(factor)`, `dot(other)`,
`cross(other)`, `norm()` and `normalized()` (the zero vector stays zero).
The constants `ZERO`, `FORWARD` (+x), `LEFT` (+y), `UP` (+z) and `DOWN` (-z)
are provided. Functions:

- `distance(a, b)` – Euclidean distance.
- `projection(a, b)` – `a` projected onto the direction of `b`.
- `reflection(v1, v2)` – `v1` reflected about the plane with normal `v2`.
- `distance_point_to_line_2d(line_start, line_end, point)` – distance in the
  XY plane from `point` to the infinite line through the two points.

### `vopix.matrix`

Vectors are row vectors, multiplied on the left of a matrix.

- `Matrix3x3(rows)` – immutable; `Matrix3x3.identity()`, `transpose()`,
  `a @ b` for matrix multiplication, `rotate(vector)`, and indexing by row.
  A `ValueError` is raised unless it is given three rows of three values.
- `euler_to_matrix(rotation)` and `matrix_to_euler(matrix)` convert between
  Euler angles in degrees and rotation matrices.
- `rotate_point(point, rotation, pivot)` rotates a point by Euler angles in
  degrees around a pivot.
- `identity_4x4()`, `projection_matrix(right, left, top, bottom, near, far)`
  (orthographic, translation in the last row) and
  `multiply_by_orthographic(matrix, right, left, top, bottom, near, far)`
  return 4x4 matrices as tuples of tuples.

### `vopix.numeric`

`lerp(t, a, b)`, `step(edge, x)`, `smoothstep(edge0, edge1, x)`,
`clamp(x, low, high)`, `sign(x)`, `modulus(a, b)` and `fmodulus(a, b)`
(remainders shifted up by `b` when negative; `modulus` raises
`ZeroDivisionError` for `b == 0`), and `strings_equal(a, b)` /
`strings_equal_ignore_case(a, b)`.

### `vopix.trie`

`Trie` maps string keys to values tagged with a `TrieType`
(`NONE`, `POINTER`, `STRING`, `VECTOR3`, `DOUBLE`, `FLOAT`, `CHAR`, `INT`).

- `insert(key, value, value_type=None)` stores or replaces a value; without
  a type, one is inferred (`str` → `STRING`, `Vector3` → `VECTOR3`,
  `int` → `INT`, `float` → `DOUBLE`, anything else → `POINTER`).
- `key in trie`, `len(trie)`, `get(key, default)`, `get_with_type(key)`
  (`(None, TrieType.NONE)` when absent), and `get_as(key, value_type, default)`,
  which returns the default unless the stored type matches.
- `items()` yields `(key, type, value)` in character-code order of the keys;
  `clear()` empties the trie.

### `vopix.linkedlist`

`LinkedList(items=())` is a doubly linked list of `ListCell` objects
(`element`, `next`, `previous`). It has `append`, `appendleft`,
`insert(index, element)` (past the end appends), `pop`, `popleft`
(`IndexError` when empty), `remove_cell(cell)`, `del lst[i]`, `lst[i]`,
iteration, `len()` and `cells()`. Negative indexes count from the end;
out-of-range indexes raise `IndexError`.

### `vopix.logs`

`Logger(level=LogLevel.INFO, stream=None)` writes to `stream` (standard
output by default) every message whose `LogLevel` (`NO_LOGGING`, `ERROR`,
`WARNING`, `INFO`, `DEBUG`) is at most its own level. `log(level, message,
*args)` applies `%` formatting when arguments are given. `open_file(path)`
also copies messages to a file; if the file cannot be opened an error is
logged and file logging stays off. `close_file()` closes it, as does leaving
a `with` block. `file_open` tells whether a file is attached.

### `vopix.fps`

`FPSCounter(clock=None)` averages the last ten frame times. `clock` returns
milliseconds (a monotonic clock by default). `tick()` records a frame and
returns the frame rate, also kept in `fps`; an average of zero gives
infinity.

### `vopix.jsonutil`

- `open_json(path, name)` loads a JSON file from a directory, adding the `/`
  when needed; it raises `OSError` or `json.JSONDecodeError`.
- `get_number(obj, key, default)` – the default when the key is absent, 0 when
  the value is not a number.
- `get_vector3(obj, key, default)` – a `Vector3` from an `[x, y, z]` array,
  missing components being 0.
- `vector3_to_json(vector)` – `[x, y, z]`.

### `vopix.uigeometry`

`morph_rectangle(min_x, min_y, max_x, max_y)` and
`morph_line(min_x, min_y, max_x, max_y, width)` return four `(x, y)` corners
in triangle-strip order. Coordinates are truncated to integers; rectangle far
edges are shifted by `EDGE_OFFSET` (0.375); `width` of a line is half its
thickness.

### `vopix.uibatch`

- `UIBatch(game_scale=1.0, text_cache=None)` queues `UIElement`s for one
  frame: `draw_rectangle`, `draw_textured_rectangle`, `draw_text`,
  `draw_point` and `draw_line`. Coordinates are divided by `game_scale` and
  truncated. Setting `enabled` to `False` makes the draw calls do nothing.
  `elements` shows the queue; `flush()` returns a list of
  `(element, quad)` pairs, ages the text cache and clears the queue.
  Drawing text without a text cache raises `RuntimeError`.
- `TextCache(render, capacity=100)` keeps textures per `(font, text)`;
  `render(text, font)` must return `(texture, width, height)`. A new entry
  counts as used for two frames and `end_frame()` ages every entry. When the
  cache is full, the first entry not used recently is replaced; if there is
  none, `CacheFullError` is raised.

### `vopix.bounds`

- `model_corners(dimension, center, position, rotation, small_scale=False)` –
  world positions of the eight corners of a voxel grid (halved for small-scale
  models).
- `model_bounds(...)` – the axis-aligned `(min, max)` box around them.
- `merge_bounds(boxes)` – the box enclosing several boxes; a single box
  collapses to its centre, and z is clamped to 0–255.

## Example

```python
from vopix.vector import Vector3
from vopix.matrix import Matrix3x3, euler_to_matrix, rotate_point
from vopix.trie import Trie, TrieType

v = Vector3(1.0, 2.0, 2.0)
print(v.norm())  # 3.0

m = euler_to_matrix(Vector3(0, 0, 90)) @ Matrix3x3.identity()
p = rotate_point(Vector3(1, 0, 0), Vector3(0, 0, 90), Vector3(0, 0, 0))

scene = Trie()
scene.insert("sunDirection", Vector3(0.75, 0.2, -1.5), TrieType.VECTOR3)
sun = scene.get_as("sunDirection", TrieType.VECTOR3, Vector3(0, 0, -1))
```

## What this package does not do

It has no window, game loop or command to run, and it draws nothing: the UI
batch only produces quads and the text cache only calls the `render` function
you give it. There is no entity-component system, scene loading, voxel model
files, physics, lighting, shadow rendering or scripting.