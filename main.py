import sys
from pathlib import Path

# Allow running straight from a checkout: the package lives under src/.
SRC_PATH = Path(__file__).resolve().parent / "src"
if SRC_PATH.is_dir() and str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

try:
    from cjkescape.app import main
except ImportError as e:
    print("Error: Could not import the CjkEscape application.")
    print("Please ensure PyQt6 and pyperclip are installed (e.g. `pip install -e .`).")
    print(f"Details: {e}")
    sys.exit(1)


if __name__ == '__main__':
    main()
