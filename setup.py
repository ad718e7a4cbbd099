"""
Setup script for termhint keyboard navigation overlays.
"""

from setuptools import setup, find_packages

setup(
    name="termhint",
    version="0.1.0",
    description="Keyboard navigation overlay algorithms for terminal UIs: fuzzy search, hints and tooltips",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="termhint Team",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Environment :: Console",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
