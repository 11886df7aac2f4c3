[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marketcore"
version = "0.1.0"
description = "Validation, pagination, structured errors, JSON responses, layered settings and page contexts for a marketplace web backend"
requires-python = ">=3.11"
dependencies = []
keywords = ["web", "http", "pagination", "validation", "responses", "settings", "marketplace"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["marketcore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
