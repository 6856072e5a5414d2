"""
setup.py for tabvars

Installs the tabvars package and the ``tabvars`` console script, which
shows important CMake variables from a nearby CMakeCache.txt.

Configuration:
- Edit tabvars/config/defaults.yaml to change the variables shown
- Or pass --config <dir> pointing at a directory with your own defaults.yaml
"""

from pathlib import Path
from setuptools import setup, find_packages

# Read README for long description
readme_path = Path("README.md")
long_description = ""
if readme_path.exists():
    with open(readme_path, "r", encoding="utf-8") as f:
        long_description = f.read()

setup(
    name="tabvars",
    version="1.0.0",
    description="Aligned tables of build variables and a CMakeCache.txt viewer",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["tabvars", "tabvars.*"]),
    package_data={
        "tabvars": [
            "config/defaults.yaml",
        ]
    },
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "tabvars=tabvars.main:main",
        ],
    },
    zip_safe=False,
    python_requires=">=3.10",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "black",
            "flake8",
            "mypy",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: POSIX :: Linux",
        "Topic :: Software Development :: Build Tools",
    ],
)
