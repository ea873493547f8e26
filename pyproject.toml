[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "radiuskit"
version = "0.1.0"
description = "RADIUS packets, attributes, an asyncio UDP client and FreeRADIUS dictionary parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["radius", "aaa", "authentication", "accounting", "freeradius", "rfc2865", "rfc2866", "rfc2868"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: System :: Systems Administration :: Authentication/Directory",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["radiuskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
