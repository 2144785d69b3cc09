from invoke import task
from pathlib import Path

# Get project root directory
PROJECT_ROOT = Path(__file__).parent.absolute()


def project_relative(path):
    """Convert a relative path to an absolute path relative to the project root."""
    return str(PROJECT_ROOT / path)


@task
def install(c):
    """Install the project in editable mode with test dependencies."""
    c.run("pip install -e '.[test]'")


@task
def test(c, path=None):
    """Run Django tests. Optionally specify a specific test path."""
    manage_py = project_relative("manage.py")
    settings = "--settings=courtside.test_settings"
    if path:
        c.run(f"python {manage_py} test {path} {settings}")
    else:
        c.run(f"python {manage_py} test {settings}")


@task
def pytest(c, path=None):
    """Run the test suite with pytest (pytest-django)."""
    c.run(f"pytest {path or ''}".strip())


@task
def check(c):
    """Run Django system checks."""
    manage_py = project_relative("manage.py")
    c.run(f"python {manage_py} check")


@task
def shell(c):
    """Start Django shell."""
    manage_py = project_relative("manage.py")
    c.run(f"python {manage_py} shell")


@task
def samples(c, format="standard-bo3", count=5, doubles=False):
    """Print randomly generated results for a match format."""
    manage_py = project_relative("manage.py")
    flags = " --doubles" if doubles else ""
    c.run(
        f"python {manage_py} generate_sample_results --format {format} --count {count}{flags}"
    )
