# config/tools/validate_nav.py

import sys           # for exit codes
from pprint import pprint  # for structured printing

# make src discoverable if running as a script
from pathlib import Path
# __file__ is .../config/tools/validate_nav.py
# parents[2] is the project root; append ROOT/src
PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.append(str(PROJECT_ROOT / "src"))

from env.loader import layout_from_config, load_nav_config  # import our loader
from navigation.provider import GridProvider


def main() -> None:
    """Load and print the resolved navigation config, failing fast on errors."""
    config_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    try:
        cfg = load_nav_config(config_path)
    except (FileNotFoundError, KeyError, ValueError) as e:
        print("Navigation config validation FAILED:", file=sys.stderr)
        print(repr(e), file=sys.stderr)
        sys.exit(1)                          # non-zero exit: CI will mark as failed

    layout = layout_from_config(cfg.layout)
    provider = GridProvider.from_layout(layout)

    print("Navigation config validation OK.")
    print("\nLayout:")
    pprint(cfg.layout)
    print("\nNode spacing:", layout.spacing)
    print("Grid:", provider.grid, "nodes:", len(provider.grid))
    print("\nNavigation:")
    pprint(cfg.navigation)
    print("\nMonitoring:")
    pprint(cfg.monitoring)


if __name__ == "__main__":
    main()
