from setuptools import setup


setup(
    name="tagwrap",
    version="0.1.0",
    description="Markup tag aware optimal-fit text wrapper",
    author="DragonMinded",
    license="Public Domain",
    packages=[
        "tagwrap",
    ],
    install_requires=[
        req for req in open("requirements.txt").read().split("\n") if len(req) > 0
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">3.8",
    entry_points={
        "console_scripts": [
            "tagwrap = tagwrap.__main__:cli",
        ],
    },
)
