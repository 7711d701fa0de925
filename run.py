#!/usr/bin/env python3
"""
Digital Bank Entry Point

Runs the demonstration scenario and prints statements and the customer roster.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from digital_bank.demo import main


if __name__ == "__main__":
    main()
