import pathlib
import sys

def pytest_sessionstart(session):
    # Ensure the package is importable without installing it.
    root = pathlib.Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(root))
