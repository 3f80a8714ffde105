[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursebook"
version = "0.1.0"
description = "Course structure, schedules and exercise extraction for mdBook-based training material"
requires-python = ">=3.10"
keywords = ["mdbook", "markdown", "course", "preprocessor", "schedule", "training", "exercises"]
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
    "Topic :: Education",
    "Topic :: Text Processing :: Markup :: Markdown",
]
dependencies = [
    "pyyaml",
    "markdown-it-py",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mdbook-course = "coursebook.preprocessor:main"
course-schedule = "coursebook.schedule:main"
course-content = "coursebook.content:main"
mdbook-exerciser = "coursebook.exerciser:main"

[tool.hatch.build.targets.wheel]
packages = ["coursebook"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
