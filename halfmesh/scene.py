"""Viewer state: display toggles, selection and menu actions on a mesh."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto

from halfmesh.buffers import MeshBuffers, make_buffers
from halfmesh.camera import Camera, FpsCounter
from halfmesh.geometry import Point3D
from halfmesh.mesh import Face, Halfedge, Mesh, Vertex

INFLATE_STEP = 0.01


class MenuItem(Enum):
    """Entries of the viewer's menu."""

    CATMULLCLARK = auto()
    DRAWWIREFRAME = auto()
    EXIT = auto()
    DRAWMESH = auto()
    LOOP = auto()
    DRAWMESHVERTICES = auto()
    CONTRACTEDGE = auto()
    CONTRACTFACE = auto()
    DRAWCREASE = auto()
    DRAWSILHOUETTE = auto()
    GENERATE = auto()
    CUT = auto()
    INFLATE = auto()
    SELECTEDGE = auto()
    SELECTFACE = auto()
    SELECTVERTEX = auto()
    SHADINGTYPE = auto()
    SMOOTHEN = auto()
    SPLITEDGE = auto()
    SPLITFACE = auto()
    SELECTCLEAR = auto()
    TRIANGULATE = auto()
    UNDO = auto()
    WRITE = auto()
    SIMPLIFY = auto()
    DRAWNORMALS = auto()
    OPENFILE = auto()


_TOGGLES = {
    MenuItem.SHADINGTYPE: "smooth",
    MenuItem.DRAWMESH: "draw_mesh",
    MenuItem.DRAWMESHVERTICES: "draw_vertices",
    MenuItem.DRAWWIREFRAME: "draw_wireframe",
    MenuItem.DRAWNORMALS: "draw_normals",
    MenuItem.DRAWSILHOUETTE: "draw_silhouette",
}


@dataclass(eq=False)
class Viewer:
    """A mesh together with what is shown of it and what is selected."""

    mesh: Mesh = field(default_factory=Mesh)
    camera: Camera = field(default_factory=Camera)
    fps_counter: FpsCounter = field(default_factory=FpsCounter)
    smooth: bool = False
    draw_mesh: bool = True
    draw_wireframe: bool = False
    draw_vertices: bool = False
    draw_silhouette: bool = False
    draw_normals: bool = False
    picked_point: Point3D | None = None
    closest_edge: Halfedge | None = None
    closest_vertex: Vertex | None = None
    closest_face: Face | None = None
    running: bool = True
    buffers: MeshBuffers = field(init=False)

    def __post_init__(self) -> None:
        self._rebuild()

    def _rebuild(self) -> None:
        self.buffers = make_buffers(self.mesh)

    def clear_selection(self) -> None:
        """Forget the picked point and every selected element."""
        self.closest_edge = None
        self.closest_vertex = None
        self.closest_face = None
        self.picked_point = None

    def select_closest_edge(self) -> Halfedge | None:
        """Select the twinned halfedge nearest to the picked point."""
        if self.picked_point is None:
            return None
        if not self.mesh.halfedges:
            self.closest_edge = None
            return None
        best = self.mesh.halfedges[0]
        best_distance = math.inf
        for halfedge in self.mesh.halfedges:
            if halfedge.twin is None:
                continue
            distance = self.picked_point.dist_to_segment(
                halfedge.source.point, halfedge.twin.source.point
            )
            if distance < best_distance:
                best_distance = distance
                best = halfedge
        self.closest_edge = best
        return best

    def select_closest_vertex(self) -> Vertex | None:
        """Select the vertex nearest to the picked point."""
        if self.picked_point is None:
            return None
        if not self.mesh.vertices:
            self.closest_vertex = None
            return None
        picked = self.picked_point
        self.closest_vertex = min(self.mesh.vertices, key=lambda v: picked.dist(v.point))
        return self.closest_vertex

    def inflate(self) -> None:
        """Push every vertex a small step along its normal."""
        for vertex in self.mesh.vertices:
            vertex.point += vertex.normal * INFLATE_STEP
        self._rebuild()

    def silhouette_edges(self) -> list[int]:
        """Return corner index pairs of edges whose two faces face opposite ways."""
        indices: list[int] = []
        eye = self.camera.eye
        for halfedge in self.mesh.halfedges:
            if halfedge.twin is None:
                continue
            v1 = halfedge.source
            v2 = halfedge.twin.source
            direction = eye - (v1.point + v2.point) * 0.5
            front = direction.dot(halfedge.adjacent_face.normal) < 0
            back = direction.dot(halfedge.twin.adjacent_face.normal) < 0
            if front != back:
                indices.extend((v1.index, v2.index))
        return indices

    def menu(self, item: MenuItem) -> None:
        """Carry out a menu entry."""
        attribute = _TOGGLES.get(item)
        if attribute is not None:
            setattr(self, attribute, not getattr(self, attribute))
        elif item is MenuItem.SELECTCLEAR:
            self.clear_selection()
        elif item is MenuItem.SELECTEDGE:
            self.select_closest_edge()
        elif item is MenuItem.SELECTVERTEX:
            self.select_closest_vertex()
        elif item is MenuItem.INFLATE:
            self.inflate()
        elif item is MenuItem.TRIANGULATE:
            self._rebuild()
        elif item in (MenuItem.CATMULLCLARK, MenuItem.SPLITEDGE, MenuItem.SPLITFACE):
            self.clear_selection()
            self._rebuild()
        elif item is MenuItem.EXIT:
            self.mesh.clear()
            self.running = False

    def stats(self) -> dict[str, int]:
        """Return the element counts and frame rate shown on screen."""
        return {
            "vertices": len(self.mesh.vertices),
            "halfedges": len(self.mesh.halfedges),
            "faces": len(self.mesh.faces),
            "fps": int(self.fps_counter.fps),
        }