from setuptools import setup, find_packages

setup(
    name="flag-parser",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.4",
        "structlog>=22.1",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    description="Extract -short and --long flag names from a command line string.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
