[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "devdesk"
version = "0.1.0"
description = "Utility toolkit and small in-memory data services for development back-office tools"
requires-python = ">=3.10"
keywords = [
    "collections",
    "priority-queue",
    "ordered-map",
    "crypto",
    "aes",
    "compression",
    "archives",
    "localization",
    "bug-tracker",
    "utilities",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
dependencies = [
    "cryptography",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["devdesk"]

[tool.pytest.ini_options]
addopts = "-ra"
