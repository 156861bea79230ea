[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filterdemo"
version = "1.1.0"
description = "Response chart models, window size constraints and menu catalogues for exploring digital audio filters"
requires-python = ">=3.10"
dependencies = []
keywords = ["dsp", "audio", "filters", "frequency response", "group delay", "pole zero"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["filterdemo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
