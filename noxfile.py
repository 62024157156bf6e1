"""Config file for NOX."""

import nox


@nox.session
def run_tests(session: nox.Session):
    """Run tests using pytest."""
    session.install(".[test]")
    session.run("pytest", "--cov=approx1d", "tests")


@nox.session
def interrogate(session: nox.Session):
    """Check for docstrings."""
    session.install("interrogate")
    session.run("interrogate", "python/approx1d")


@nox.session
def make_documentation(session: nox.Session):
    """Build the documentation."""
    session.install("-e", ".[docs]")
    session.cd("docs")
    session.run("sphinx-build", "-M", "html", ".", "_build")
