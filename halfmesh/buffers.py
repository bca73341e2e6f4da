"""Flat vertex, normal and index arrays for drawing a mesh."""

from __future__ import annotations

from dataclasses import dataclass, field

from halfmesh.geometry import Vector3D
from halfmesh.mesh import Mesh, Vertex

NORMAL_LINE_SCALE = 20.0


@dataclass
class MeshBuffers:
    """Drawing arrays built from a mesh.

    ``vertices``, ``face_normals`` and ``vertex_normals`` hold three floats per
    triangle corner. ``normal_lines`` holds, for every mesh vertex, its position
    followed by the tip of its shortened normal. ``edge_indices`` and
    ``vertex_indices`` index triangle corners in ``vertices``.
    """

    vertices: list[float] = field(default_factory=list)
    face_normals: list[float] = field(default_factory=list)
    vertex_normals: list[float] = field(default_factory=list)
    normal_lines: list[float] = field(default_factory=list)
    edge_indices: list[int] = field(default_factory=list)
    vertex_indices: list[int] = field(default_factory=list)
    triangle_count: int = 0


def make_buffers(mesh: Mesh) -> MeshBuffers:
    """Fan-triangulate every face of ``mesh`` into drawing arrays.

    Each vertex's ``index`` is set to the last triangle corner it was emitted
    as, so that edge and vertex indices refer into ``vertices``.
    """
    buffers = MeshBuffers()
    corner = 0

    def emit(vertex: Vertex) -> None:
        nonlocal corner
        buffers.vertices.extend(vertex.point)
        buffers.vertex_normals.extend(vertex.normal)
        vertex.index = corner
        corner += 1

    for face in mesh.faces:
        first = face.adjacent_halfedge
        if first is None:
            continue
        edge = first.next
        while True:
            for vertex in (first.source, edge.source, edge.next.source):
                emit(vertex)
            buffers.face_normals.extend(list(face.normal) * 3)
            buffers.triangle_count += 1
            edge = edge.next
            if edge.next is first:
                break

    for vertex in mesh.vertices:
        buffers.normal_lines.extend(vertex.point)
        tip = vertex.point + vertex.normal / NORMAL_LINE_SCALE
        buffers.normal_lines.extend(tip)

    for halfedge in mesh.halfedges:
        if halfedge is None or halfedge.next is None or halfedge.next.next is None:
            continue
        buffers.edge_indices.append(halfedge.source.index)
        buffers.edge_indices.append(halfedge.next.source.index)

    buffers.vertex_indices = [vertex.index for vertex in mesh.vertices]
    return buffers


__all__ = ["MeshBuffers", "Vector3D", "make_buffers"]