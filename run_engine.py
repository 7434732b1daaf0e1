"""Entry point for running the report generator from a source checkout."""
import sys
from pathlib import Path

# Ensure the package root is in path
root = Path(__file__).parent.resolve()
sys.path.insert(0, str(root))

from invoice_annex.cli.main import main

if __name__ == "__main__":
    main()
