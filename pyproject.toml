[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wirefdf"
version = "0.1.0"
description = "Interactive wireframe viewer for .fdf height maps with isometric, orthographic and cavalier projections"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["wireframe", "heightmap", "fdf", "isometric", "projection", "viewer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wirefdf = "wirefdf.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wirefdf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
