[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netlab"
version = "0.1.0"
description = "Small networking programs: an HTTP/1.1 parser and static server, a TCP echo pair, a line search tool, a teacher and course web service, and a terminal flapping game"
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["http", "tcp", "echo", "grep", "web-service", "flask", "sqlite", "game", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Text Processing :: Filters",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
netlab-grep = "netlab.minigrep:main"
netlab-echo-server = "netlab.tcp_echo:server_main"
netlab-echo-client = "netlab.tcp_echo:client_main"
netlab-http-server = "netlab.server:main"
netlab-game = "netlab.game:main"
netlab-teacher-service = "netlab.service_app:main"

[tool.hatch.build.targets.wheel]
packages = ["netlab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
