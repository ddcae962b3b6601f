"""
python -m rps_cli
"""
import sys

from .main import main

sys.exit(main())
