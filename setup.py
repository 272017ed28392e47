"""
Setup configuration for LINED package.
"""

from setuptools import setup, find_packages

setup(
    name="lined",
    version="0.1.0",
    description="EDLIN-style Line Editor with a Fullscreen Visual Mode",
    author="TN3W",
    author_email="tn3w@protonmail.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pygments>=2.19.1",
        "windows-curses>=2.4.1; platform_system == 'Windows'",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "lined=lined.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console :: Curses",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Editors",
        "Topic :: Utilities",
    ],
)
