# contestlib

Classic algorithms and data structures from competitive programming, written
as plain Python functions and classes. The package has no runtime
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

### Graphs
- `contestlib.scc`: `strongly_connected_components(n, adj)` returns the
  components in topological order of the condensation. `component_ids(n, adj)`
  gives each vertex the index of its component.
- `contestlib.twosat`: `two_sat(n, clauses)` takes clauses `(a, b)` of 1-based
  literals, where a negative value is a negation. It returns a string with `+`
  or `-` for each variable, or `None` when the formula cannot be satisfied.
- `contestlib.bcc`: `BridgeGraph(n)` has `add_edge(u, v)` and `components()`.
  `components()` returns the 2-edge-connected component id of every vertex.
- `contestlib.maxflow`: `max_flow(edges, n, source, sink)` uses Dinic's
  algorithm on directed `(u, v, capacity)` edges.
- `contestlib.hld`: `HeavyLightDecomposition(n, edges, root)` provides
  `is_ancestor`, `lca` and `position`. It also provides `path_ranges(u, v)` and
  `root_ranges(u)`, which return inclusive position ranges for use with any
  range structure.

### Strings
- `contestlib.strings`: `prefix_function`, `prefix_automaton(s, alphabet)`,
  `prefix_occurrences(pi)`, `manacher(s)` and `min_rotation(s)`.
  `manacher` returns the `odd` and `even` palindrome radii.
- `contestlib.hashing`: `string_hash`, `RangeHash` and `HashSegmentTree`.
  These are double polynomial hashes modulo 1e9+7 with bases 127 and 1000003.
  - `RangeHash` answers substring hashes with `get`. Reversed substring hashes
    come from `get_reverse` when the object is built with `with_reverse=True`.
  - `HashSegmentTree` supports point updates.

### Transforms and number theory
- `contestlib.fft`: `multiply(a, b)` multiplies polynomials and rounds the
  coefficients. `multiply_mod(a, b)` works modulo 1e9+7.
- `contestlib.ntt`: `ntt(a, invert)`, `multiply(a, b)` modulo 998244353, and
  `primitive_root(p)`.
- `contestlib.fwht`: `fwht(a, inverse, kind)` and `convolve(a, b, kind)` work
  modulo 998244353. The `Convolution` enum (`AND`, `OR`, `XOR`) selects the
  operation.
- `contestlib.numtheory`: `exgcd`, `diophantine` (which returns `None` when
  there is no solution) and `count_solutions` for solutions inside a box.
- `contestlib.stirling`: `stirling1`, `stirling1_row`, `stirling2` and
  `stirling2_row`, all modulo 998244353.
- `contestlib.linalg`: `determinant(matrix)` uses Gaussian elimination with
  partial pivoting.

### Data structures
- `contestlib.cht`: `ConvexHullTrick` has `insert_line(m, b)` and `query(x)`.
  Lines must be inserted with decreasing slope, and queries must use
  non-increasing `x`. Each query returns the maximum value.
- `contestlib.treap`:
  - `OrderedTreap` is a sorted multiset with `insert`, `erase`, `in`, `len`,
    `kth` (1-based), `count_less` and `sum_less`.
  - `ImplicitTreap` is a sequence with `insert(index, value)`,
    `reverse(left, right)`, `range_sum(left, right)`, `len` and iteration.

### Bit tricks and debugging
- `contestlib.bits`: `gray_code`, `inverse_gray_code`, `next_same_popcount`,
  `prev_same_popcount`, `next_bit_permutation`, `next_combination_mask`,
  `submasks` (a generator, in decreasing order) and `splitmix64`.
- `contestlib.debug`: `format_value(value)` renders nested values. Strings are
  quoted, booleans are shown as `true`/`false`, tuples go in parentheses and
  other collections go in braces. `debug(*args)` writes the rendered values to
  standard error.

### Plane geometry
- `contestlib.point`: a frozen `Point(x, y)` with arithmetic and `abs`.
  The module also has `dot`, `cross`, `dist2`, `rotate_ccw90`, `rotate_cw90`,
  `rotate_ccw` and `angle`.
- `contestlib.planar`: `lines_parallel`, `lines_collinear`,
  `segments_intersect`, `project_point_line`, `project_point_segment`,
  `distance_point_segment`, `distance_point_plane`, `line_intersection`,
  `circle_center`, `circle_line_intersection` and
  `circle_circle_intersection`.
- `contestlib.polygon`: `signed_area`, `area`, `centroid`, `is_simple`,
  `point_in_polygon` and `point_in_convex_polygon`. The two point tests return
  -1 for inside, 0 for on the boundary and 1 for outside.

## Example

```python
from contestlib.maxflow import max_flow
from contestlib.planar import line_intersection
from contestlib.point import Point
from contestlib.strings import prefix_function

line_intersection(Point(0, 0), Point(2, 4), Point(3, 1), Point(-1, 3))  # Point(x=1.0, y=2.0)
prefix_function("abacaba")  # [0, 0, 1, 0, 1, 2, 3]
max_flow([(0, 1, 3), (1, 2, 2)], 3, 0, 2)  # 2
```

## Limitations

- Geometry covers the plane only. There are no three-dimensional vector,
  line or plane types. The one exception is `planar.distance_point_plane`,
  which takes plain coordinates.
- This is a library only. It has no command-line tool.