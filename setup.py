from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

from setuptools import find_packages, setup

loader = SourceFileLoader("autofragment", "./src/autofragment/__init__.py")
autofragment = ModuleType(loader.name)
loader.exec_module(autofragment)

setup(
    name="autofragment",
    version=autofragment.__version__,  # type: ignore
    description="Mark the top-level content of reveal.js slides as fragments.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    python_requires=">=3.11.0",
    package_dir={"": "src"},
    packages=find_packages(where="src", exclude=["tests"]),
    entry_points={"console_scripts": ["autofragment=autofragment.cli:main"]},
    install_requires=[
        "appdirs",
        "beautifulsoup4",
        "cyclopts",
        "lxml",
        "pydantic>=2.10",
        "PyYAML",
        "rich",
    ],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
)
