#!/usr/bin/env python
from gradfit.cli import app

if __name__ == "__main__":
    app()
