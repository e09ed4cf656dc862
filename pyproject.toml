[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starkkit"
version = "0.1.0"
description = "FRI parameter sets, verifier cost estimates, hash call counting, metric snapshots and small example AIRs for STARK tooling"
requires-python = ">=3.10"
dependencies = []
keywords = ["stark", "fri", "zero-knowledge", "air", "cost-estimation", "babybear"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["starkkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
