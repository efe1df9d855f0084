[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fdf"
version = "0.1.0"
description = "Wireframe viewer that draws .fdf height maps in isometric projection"
requires-python = ">=3.10"
keywords = ["fdf", "wireframe", "isometric", "heightmap", "xpm", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fdf = "fdf.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fdf"]

[tool.pytest.ini_options]
addopts = "-ra"
