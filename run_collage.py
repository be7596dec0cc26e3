"""
run_collage.py: CLI Entry Point

This script serves as the command-line interface entry point for the
hybrid collage builder. It forwards execution to the CLI logic defined
in `src/hybrid_collage/cli.py`.

Usage:
    python run_collage.py photos/ [options]

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.

For help on available options, run:
    python run_collage.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import hybrid_collage.cli as hc_cli

if __name__ == "__main__":
    raise SystemExit(hc_cli.main())
