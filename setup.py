# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="helperkit",
    version="1.0.0",
    description="Filesystem, checksum, process and logging helpers",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["helperkit*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'helperkit=helperkit.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
