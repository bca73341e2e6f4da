"""Half-edge polygon meshes: OBJ loading, draw buffers, camera and viewer state."""

__version__ = "0.1.0"