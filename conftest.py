
# Make the project root importable when running the tests from a checkout
import sys, pathlib
root = pathlib.Path(__file__).resolve().parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))
