"""Setup configuration for chatmod."""

from setuptools import setup, find_packages

setup(
    name="chatmod",
    version="0.1.0",
    description="Moderation command handling and moderator-list polling for chat clients",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "prompt_toolkit>=3.0",
        "PyYAML>=6.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
)
