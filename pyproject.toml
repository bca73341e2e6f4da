[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "halfmesh"
version = "0.1.0"
description = "Half-edge polygon meshes: OBJ loading, normalization, draw buffers, camera and selection logic"
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "half-edge", "obj", "geometry", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
halfmesh = "halfmesh.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["halfmesh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
