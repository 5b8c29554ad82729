[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cyberkit"
version = "0.1.0"
description = "Building blocks for NLP pipelines: tokenization, vocabularies, SentencePiece segmentation and task post-processing."
requires-python = ">=3.10"
dependencies = []
keywords = ["nlp", "tokenizer", "sentencepiece", "vocabulary", "ner", "classification"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cyberkit"]

[tool.hatch.build.targets.sdist]
include = ["cyberkit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
