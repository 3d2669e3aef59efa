[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hclassist"
version = "0.1.0"
description = "Helpers for editor tooling around HCL: token-stream node trees, source ranges, markdown-to-plain-text cleanup, path comparison and templated paths."
requires-python = ">=3.10"
dependencies = []
keywords = ["hcl", "language-server", "markdown", "ranges", "paths"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hclassist"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
