#!/usr/bin/env python3
from .main_runner import main

if __name__ == "__main__":
    main()
