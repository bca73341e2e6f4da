"""Half-edge polygon meshes read from OBJ files."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable

from halfmesh.geometry import Point3D, Vector3D

logger = logging.getLogger(__name__)


def _default_normal() -> Vector3D:
    return Vector3D(1.0, 1.0, 1.0)


def _corner_normal(halfedge: Halfedge) -> Vector3D:
    """Unit normal of the corner made by ``halfedge`` and the two after it."""
    following = halfedge.next
    after = following.next
    v1 = halfedge.source.point - following.source.point
    v2 = following.source.point - after.source.point
    normal = v1.cross(v2)
    normal.normalize()
    return normal


@dataclass(eq=False)
class Vertex:
    """A mesh vertex with its position and normal."""

    point: Point3D = field(default_factory=Point3D)
    originof: Halfedge | None = field(default=None, repr=False)
    index: int = 0
    normal: Vector3D = field(default_factory=_default_normal)

    def compute_normal(self) -> None:
        """Set the normal from the corner at the outgoing halfedge."""
        if self.originof is None:
            raise ValueError("vertex has no outgoing halfedge")
        self.normal = _corner_normal(self.originof)


@dataclass(eq=False)
class Halfedge:
    """One directed side of an edge, owned by a single face."""

    source: Vertex | None = field(default=None, repr=False)
    adjacent_face: Face | None = field(default=None, repr=False)
    next: Halfedge | None = field(default=None, repr=False)
    prev: Halfedge | None = field(default=None, repr=False)
    twin: Halfedge | None = field(default=None, repr=False)
    index: int = 0


@dataclass(eq=False)
class Face:
    """A polygonal face bounded by a cycle of halfedges."""

    adjacent_halfedge: Halfedge | None = field(default=None, repr=False)
    normal: Vector3D = field(default_factory=_default_normal)
    index: int = 0

    def compute_normal(self) -> None:
        """Set the normal from the first corner of the face."""
        if self.adjacent_halfedge is None:
            raise ValueError("face has no halfedge")
        self.normal = _corner_normal(self.adjacent_halfedge)


@dataclass(eq=False)
class Mesh:
    """A polygon mesh stored as vertices, halfedges and faces."""

    vertices: list[Vertex] = field(default_factory=list)
    halfedges: list[Halfedge] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)
    name: str = ""

    def clear(self) -> None:
        """Remove every vertex, halfedge and face."""
        self.vertices = []
        self.halfedges = []
        self.faces = []

    def check_mesh(self) -> bool:
        """Return whether every halfedge has a twin."""
        closed = all(h.twin is not None for h in self.halfedges)
        if closed:
            logger.info("Each edge has a twin!")
        else:
            logger.warning("Not all edges have their twins!")
        return closed

    def read_file(self, filename: str | os.PathLike[str]) -> None:
        """Read an OBJ file; a missing file raises OSError."""
        with open(filename, encoding="utf-8") as stream:
            self.name = os.fspath(filename)
            self.read_lines(stream)

    def read_lines(self, lines: Iterable[str]) -> None:
        """Read OBJ text, link twins, check the mesh and normalize it.

        Only ``v`` and ``f`` records are used; faces with fewer than three
        vertices are skipped. Malformed records raise ValueError.
        """
        twin_map: dict[tuple[int, int], Halfedge] = {}
        for number, line in enumerate(lines, start=1):
            tokens = line.split()
            if not tokens:
                continue
            keyword, args = tokens[0], tokens[1:]
            if keyword == "v":
                self._add_vertex(args, number)
            elif keyword == "f":
                ids = [self._vertex_id(token, number) for token in args]
                if len(ids) >= 3:
                    self._add_face(ids, twin_map)
        self.check_mesh()
        self.normalize()

    def _add_vertex(self, args: list[str], number: int) -> None:
        try:
            x, y, z = (float(value) for value in args[:3])
        except ValueError as exc:
            raise ValueError(f"line {number}: bad vertex {' '.join(args)!r}") from exc
        logger.debug("v %s %s %s", x, y, z)
        self.vertices.append(Vertex(point=Point3D(x, y, z)))

    def _vertex_id(self, token: str, number: int) -> int:
        try:
            vid = int(token.split("/", 1)[0]) - 1
        except ValueError as exc:
            raise ValueError(f"line {number}: bad face index {token!r}") from exc
        if not 0 <= vid < len(self.vertices):
            raise ValueError(f"line {number}: face index {token!r} out of range")
        return vid

    def _add_face(self, ids: list[int], twin_map: dict[tuple[int, int], Halfedge]) -> None:
        hedges = [Halfedge() for _ in ids]
        face = Face(adjacent_halfedge=hedges[0])
        rolled_back = hedges[-1:] + hedges[:-1]
        rolled_forward = hedges[1:] + hedges[:1]
        next_ids = ids[1:] + ids[:1]
        for h, prev, nxt, start, end in zip(hedges, rolled_back, rolled_forward, ids, next_ids):
            h.prev = prev
            h.next = nxt
            h.source = self.vertices[start]
            twin = twin_map.pop((end, start), None)
            if twin is not None:
                h.twin = twin
                twin.twin = h
            else:
                twin_map[(start, end)] = h
            h.adjacent_face = face
            self.halfedges.append(h)
        self.faces.append(face)

    def normalize(self) -> None:
        """Centre the mesh on the origin and scale its largest extent to one."""
        if not self.vertices:
            return
        points = [v.point for v in self.vertices]
        lows = [min(axis) for axis in zip(*points)]
        highs = [max(axis) for axis in zip(*points)]
        centre = Vector3D(*((hi + lo) / 2 for lo, hi in zip(lows, highs)))
        scale = max(hi - lo for lo, hi in zip(lows, highs))
        for point in points:
            point += -centre
            point /= scale