"""
Entry Point Script (Bootstrap)
==============================
Development runner that works without installing the package.

It sits outside the 'src' directory and puts 'src' on 'sys.path' so that
imports like 'from dimensionless.model...' resolve.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

appid = 'dimensionless.calculator'  # Arbitrary string
try:
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(appid)
except (AttributeError, ImportError):
    # Not on Windows or ctypes not available
    pass

from dimensionless.app.main import main

if __name__ == "__main__":
    sys.exit(main())
