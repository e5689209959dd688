# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="singleinclude",
    version="1.0.0",
    description="Flatten a tree of #include'd C/C++ files into a single self-contained header",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["singleinclude*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'singleinclude=singleinclude.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
