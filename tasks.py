from __future__ import annotations

from os import path
from shlex import quote

from invoke import task

ROOT = path.relpath(path.dirname(__file__))


def _pytest_args() -> list[str]:
    # The doctests are supplemental examples, the real tests are in
    # uriparts/test/
    return ["--doctest-modules", "--pyargs", "uriparts"]


@task
def test(ctx, combine_coverage=False):
    """Run uriparts test suite"""
    cov_args = ["--parallel-mode"] if combine_coverage is True else []
    ctx.run(cmd(["coverage", "run", "--source", "uriparts"] + cov_args +
                ["-m", "pytest"] + _pytest_args()))

    if not combine_coverage:
        ctx.run("coverage report")


@task
def pep8(ctx):
    """Lint code for PEP 8 violations"""
    ctx.run("flake8 --version")
    ctx.run("flake8 --max-line-length 88 setup.py tasks.py uriparts")


@task
def typecheck(ctx):
    """Check type annotations with mypy"""
    ctx.run("mypy uriparts")


@task
def build_dists(ctx):
    """Build distribution packages"""
    ctx.run("python setup.py sdist", pty=True)
    ctx.run("python setup.py bdist_wheel", pty=True)


def cmd(*args):
    r"""
    Create a shell command string from a list of arguments.

    >>> print(cmd("a", "b", "c"))
    a b c
    >>> print(cmd(["ls", "-l", "some dir"]))
    ls -l 'some dir'
    """
    if len(args) == 1 and not isinstance(args[0], str):
        return cmd(*args[0])
    return " ".join(quote(arg) for arg in args)
