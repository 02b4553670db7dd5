import sys, pathlib

# Ensure project src directory (and tests/ for helpers) is on path for tests
PROJECT_ROOT = pathlib.Path(__file__).parent.parent
SRC = PROJECT_ROOT / "src"
TESTS = PROJECT_ROOT / "tests"
for path in (SRC, TESTS):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
