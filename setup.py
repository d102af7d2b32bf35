# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="fileexplorer",
    version="0.1.0",
    description="Generate nested, compile-time checked path constants from project file lists",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["fileexplorer*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'fileexplorer=fileexplorer.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
