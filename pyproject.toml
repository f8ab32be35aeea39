[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mediaclassifier"
version = "1.1.0"
description = "Sort photos, videos and audio files into extension/date folders"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["media", "photos", "exif", "organizer", "sorting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mediaclassifier = "mediaclassifier.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mediaclassifier"]

[tool.pytest.ini_options]
addopts = "-ra"
