"""Configure pytest to find the script module."""
import sys
import os

# tally_cycle.py lives in tally/ as a standalone script, not a package.
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "tally"))
