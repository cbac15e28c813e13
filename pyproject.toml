[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysstatus"
version = "0.1.0"
description = "A small status-line generator reporting battery, CPU, memory, disk, network and other system information"
requires-python = ">=3.10"
keywords = ["status", "statusbar", "monitoring", "system", "battery", "cpu", "memory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Topic :: Utilities",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sysstatus = "sysstatus.status:main"

[tool.hatch.build.targets.wheel]
packages = ["sysstatus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
