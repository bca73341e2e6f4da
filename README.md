# halfmesh

`halfmesh` is a small, dependency-free library for polygon meshes held in a
half-edge structure. It reads Wavefront OBJ geometry, links every half-edge to
its twin, and rescales the model so that it is centred on the origin and its
largest extent is one. Around that it provides the state a mesh viewer keeps:
flat vertex, normal and index arrays for drawing, an orbiting camera driven by
mouse and arrow-key input, a frame-rate counter, display toggles, and
selection of the vertex or edge nearest to a picked point.

## Installation

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install ".[test]"
pytest
```

## Modules

- `halfmesh.geometry`: `Point3D` and `Vector3D` dataclasses with addition,
  subtraction, scaling and division, `dot`, `cross`, `length`, `normalize`,
  `clear`, `rotate` (radians, about an axis through the origin) and
  `set_normal`. `Point3D.dist` gives the distance to another point and
  `Point3D.dist_to_segment` the distance to a segment. `circumcenter` returns
  the centre of the sphere through four points (coplanar points raise
  `ZeroDivisionError`).
- `halfmesh.mesh`: `Vertex`, `Halfedge`, `Face` and `Mesh`.
  `Mesh.read_file` and `Mesh.read_lines` load OBJ text. Only `v` and `f`
  records are used; texture and normal indices in `f` records are ignored,
  faces with fewer than three vertices are skipped, and malformed records or
  out-of-range face indices raise `ValueError`. A missing file raises
  `OSError`. After reading, `Mesh.check_mesh` (which returns whether every
  half-edge has a twin and logs the result) and `Mesh.normalize` are run.
  `Face.compute_normal` and `Vertex.compute_normal` set a unit normal from a
  corner of the face, or of the vertex's outgoing half-edge.
- `halfmesh.buffers`: `make_buffers` fan-triangulates every face into a
  `MeshBuffers` holding triangle corner positions, per-face and per-vertex
  normals, normal line segments (each vertex and the tip of its normal scaled
  by 1/20), and edge and vertex index lists. It sets each vertex's `index` to
  the last triangle corner emitted for it.
- `halfmesh.camera`: `Camera` reacts to `reshape`, `press`, `drag`, `wheel`
  and `arrow_key` (with `ArrowKey.UP`, `DOWN`, `LEFT`, `RIGHT`);
  `FpsCounter.tick` takes the elapsed time in milliseconds and refreshes the
  rate at most every 200 ms.
- `halfmesh.scene`: `Viewer` ties a mesh to a camera, an FPS counter and its
  draw buffers. `Viewer.menu` carries out a `MenuItem`; `clear_selection`,
  `select_closest_edge`, `select_closest_vertex`, `inflate`,
  `silhouette_edges` and `stats` can also be called directly.

## Example

```python
from halfmesh.buffers import make_buffers
from halfmesh.geometry import Point3D
from halfmesh.mesh import Mesh
from halfmesh.scene import MenuItem, Viewer

mesh = Mesh()
mesh.read_lines([
    "v 0 0 0",
    "v 1 0 0",
    "v 0 1 0",
    "v 0 0 1",
    "f 1 3 2",
    "f 1 2 4",
    "f 2 3 4",
    "f 3 1 4",
])
print(len(mesh.vertices), len(mesh.halfedges), len(mesh.faces))  # 4 12 4

buffers = make_buffers(mesh)
print(buffers.triangle_count)  # 4

viewer = Viewer(mesh)
viewer.picked_point = Point3D(0.5, 0.5, 0.5)
viewer.menu(MenuItem.SELECTVERTEX)
print(viewer.stats())
```

## Command line

```
halfmesh path/to/model.obj
halfmesh --silhouette path/to/model.obj
```

reads the model and prints its vertex, half-edge and face counts. With
`--silhouette` it computes face normals and also prints how many edges are
silhouette edges as seen from the default camera. Without a path it reads
`../Models/hand.obj`. It exits with status 1 if the file cannot be opened or
is not valid OBJ data.

## What it does not do

- It opens no window and draws nothing: `MeshBuffers` are plain Python lists
  for whatever renderer you use, and picking a point on screen is left to the
  caller, who sets `Viewer.picked_point`.
- It does not edit mesh topology. `MenuItem.TRIANGULATE` only rebuilds the
  draw buffers; `CATMULLCLARK`, `SPLITEDGE` and `SPLITFACE` only clear the
  selection and rebuild the buffers; entries such as `LOOP`, `SIMPLIFY`,
  `SMOOTHEN`, `SELECTFACE`, `OPENFILE`, `WRITE` and `UNDO` do nothing.
- It does not write OBJ files.
- Vertex normals are not computed while reading: they start as `(1, 1, 1)`,
  and `Vertex.compute_normal` needs a vertex whose `originof` half-edge has
  been set by the caller.