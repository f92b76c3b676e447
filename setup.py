# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="mediatree",
    version="1.0.0",
    description="Scan a media folder into a browsable file-structure.json document",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["mediatree", "mediatree.*"]),
    python_requires=">=3.9",
    install_requires=[
        "requests",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'mediatree=mediatree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
