[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structural-patterns"
version = "0.1.0"
description = "Small, runnable examples of the structural design patterns: adapter, bridge, composite, decorator, facade and proxy."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "structural",
    "adapter",
    "bridge",
    "composite",
    "decorator",
    "facade",
    "proxy",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structural-bridge = "structural_patterns.bridge:main"
structural-composite = "structural_patterns.composite:main"
structural-decorator = "structural_patterns.decorator:main"
structural-facade = "structural_patterns.facade:main"
structural-shape-adapter = "structural_patterns.shape_adapter:main"
structural-proxy = "structural_patterns.proxy:main"
structural-plug-adapter = "structural_patterns.plug_adapter:main"

[tool.hatch.build.targets.wheel]
packages = ["structural_patterns"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
