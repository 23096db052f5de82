[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glcubes"
version = "0.1.0"
description = "A small OpenGL scene of textured cubes with a free-flying first-person camera"
requires-python = ">=3.10"
keywords = ["opengl", "3d", "camera", "pyglet", "rendering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pyglet",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
glcubes = "glcubes.app:main"

[tool.hatch.build.targets.wheel]
packages = ["glcubes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
