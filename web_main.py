#!/usr/bin/env python3
"""
Web Entry Point for the Task Management Backend

Loads optional overrides from .env.local, then starts the web API.

Usage:
    python web_main.py [--host HOST] [--port PORT] [--debug]

Examples:
    python web_main.py                    # Start on localhost:8000
    python web_main.py --port 3000        # Start on localhost:3000
    python web_main.py --host 0.0.0.0     # Start on all interfaces
"""

import sys

from task_backend.bootstrap import main

if __name__ == "__main__":
    sys.exit(main())
