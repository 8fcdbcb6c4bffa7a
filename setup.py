import io

from setuptools import setup


def file_contents(path):
    with io.open(path, encoding="utf-8") as f:
        return f.read()


def file_lines(path):
    return [line for line in file_contents(path).split("\n")
            if line.strip()]


setup(
    name="uriparts",
    description="Split, validate and normalize URIs according to RFC 3986",
    long_description=file_contents("README.rst"),
    version="0.1.0",
    packages=["uriparts", "uriparts.test"],
    package_data={"uriparts": ["py.typed"]},
    python_requires=">=3.8",
    install_requires=file_lines("requirements/install.txt"),
    extras_require={
        "tests": file_lines("requirements/test.txt"),
        "dev": file_lines("requirements/dev.txt"),
    },
    license='Apache 2.0',
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Topic :: Internet",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Processing",
    ],
    keywords="uri url rfc3986 parser validator percent-encoding"
)
