[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plagcheck"
version = "0.1.0"
description = "Token-sequence plagiarism detection for source code submissions, with a small set of companion algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "plagiarism",
    "code similarity",
    "rolling hash",
    "segment tree",
    "submissions",
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
    "Topic :: Software Development :: Quality Assurance",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["plagcheck"]

[tool.pytest.ini_options]
addopts = "-ra"
