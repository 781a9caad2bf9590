[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "storefront"
version = "1.0.0"
description = "Inventory and payment services, order models and upstream adapters for a small storefront, built around ports and adapters."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = [
    "inventory",
    "orders",
    "payments",
    "hexagonal-architecture",
    "point-of-sale",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["storefront"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
