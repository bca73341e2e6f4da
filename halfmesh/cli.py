"""Command that loads a mesh and reports what the viewer would show."""

from __future__ import annotations

import argparse
import sys

from halfmesh.mesh import Mesh
from halfmesh.scene import Viewer

DEFAULT_MODEL = "../Models/hand.obj"


def main(argv: list[str] | None = None) -> int:
    """Read an OBJ mesh and print its vertex, halfedge and face counts."""
    parser = argparse.ArgumentParser(prog="halfmesh", description=main.__doc__)
    parser.add_argument("path", nargs="?", default=DEFAULT_MODEL, help="OBJ file to read")
    parser.add_argument(
        "--silhouette",
        action="store_true",
        help="also print the number of silhouette edges seen from the default camera",
    )
    args = parser.parse_args(argv)

    print("Reading mesh from file...")
    mesh = Mesh()
    try:
        mesh.read_file(args.path)
    except OSError:
        print("Unable to open file!", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Invalid mesh: {exc}", file=sys.stderr)
        return 1

    viewer = Viewer(mesh)
    stats = viewer.stats()
    print(f"Vertices:    {stats['vertices']}")
    print(f"Halfedges: {stats['halfedges']}")
    print(f"Faces:       {stats['faces']}")
    if args.silhouette:
        for face in mesh.faces:
            face.compute_normal()
        print(f"Silhouette edges: {len(viewer.silhouette_edges()) // 2}")
    return 0


if __name__ == "__main__":
    sys.exit(main())