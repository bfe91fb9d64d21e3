# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="menutree",
    version="1.0.0",
    description="Hierarchical menus with bitmask visibility filtering, text rendering and JSON export",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["menutree", "menutree.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
