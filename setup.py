from pathlib import Path
from setuptools import find_packages, setup


def _read_version() -> str:
    init = Path(__file__).parent / "src" / "specdoc" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/specdoc/__init__.py")


setup(
    name="specdoc",
    version=_read_version(),
    description="Infer developer documentation from RSpec files with OpenAI models",
    author="GAHEOS",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["specdoc", "specdoc.*"]),
    install_requires=[
        "openai>=1.40",
        "tiktoken>=0.7",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "specdoc=specdoc.cli:main",
        ],
    },
)
