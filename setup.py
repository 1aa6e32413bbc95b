from setuptools import setup, find_packages

setup(
    name="hooksetup",
    version="0.1.0",
    description="CLI tool to point a git repository at its .githooks directory",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["hooksetup", "core"],
    entry_points={
        "console_scripts": [
            "hooksetup = hooksetup:main"
        ]
    },
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.7',
    include_package_data=True,
)
