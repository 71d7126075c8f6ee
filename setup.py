from setuptools import setup, find_packages

setup(
    name="colorphrase",
    version="0.1.0",
    description="Color the delimited parts of a text pattern",
    packages=find_packages(include=["colorphrase", "colorphrase.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest", "pytest-asyncio"],
    },
    python_requires=">=3.11",
)
