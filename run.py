"""
Entry Point Script (Bootstrap)
==============================
Starts the puzzle from a source checkout without installing it.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It puts 'src' on 'sys.path' so 'from circlecurves...' imports resolve.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from circlecurves.main import main

if __name__ == "__main__":
    main()
