[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestkit"
version = "0.1.0"
description = "Solutions to a collection of competitive programming tasks, usable as functions or from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "graphs", "combinatorics", "puzzles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
contestkit-abc160 = "contestkit.abc160:main"
contestkit-abc181 = "contestkit.abc181:main"
contestkit-abc190 = "contestkit.abc190:main"
contestkit-abc197 = "contestkit.abc197:main"
contestkit-abc217 = "contestkit.abc217:main"
contestkit-abc254 = "contestkit.abc254:main"
contestkit-abc292 = "contestkit.abc292:main"
contestkit-abc343 = "contestkit.abc343:main"
contestkit-abc353 = "contestkit.abc353:main"
contestkit-arc106 = "contestkit.arc106:main"
contestkit-past4 = "contestkit.past4:main"

[tool.hatch.build.targets.wheel]
packages = ["contestkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
