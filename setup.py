from pathlib import Path
from setuptools import setup, find_packages


def read_readme() -> str:
    readme_path = Path(__file__).resolve().parent / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


setup(
    name="codebreaker",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "cryptography>=43.0.0",
    ],
    python_requires=">=3.10",
    description="Encrypt and decrypt cheat codes for all versions of CodeBreaker PS2",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)
