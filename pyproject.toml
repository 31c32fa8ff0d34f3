[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solid-principles"
version = "0.1.0"
description = "Small runnable examples of the SOLID design principles, most shown both followed and violated."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "solid",
    "design-principles",
    "object-oriented",
    "dependency-inversion",
    "liskov",
    "open-closed",
    "interface-segregation",
    "single-responsibility",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
solid-dependency-inversion = "solid_principles.dependency_inversion:main"
solid-dependency-inversion-violation = "solid_principles.dependency_inversion_violation:main"
solid-interface-segregation = "solid_principles.interface_segregation:main"
solid-interface-segregation-violation = "solid_principles.interface_segregation_violation:main"
solid-liskov = "solid_principles.liskov:main"
solid-liskov-violation = "solid_principles.liskov_violation:main"
solid-open-close = "solid_principles.open_close:main"
solid-open-close-violation = "solid_principles.open_close_violation:main"
solid-single-responsibility = "solid_principles.single_responsibility:main"

[tool.hatch.build.targets.wheel]
packages = ["solid_principles"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
