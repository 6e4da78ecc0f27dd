#!/usr/bin/env python3
"""
Asset Ledger Entry Point

Starts the FastAPI server with a freshly constructed ledger.
"""

import sys

from asset_ledger.api import run_server
from asset_ledger.config import get_config


if __name__ == "__main__":
    config = get_config()
    print("Starting Asset Ledger...")
    print(f"Owner: {config.owner_identity}")
    print(f"Price reporter: {config.price_reporter_identity}")
    print(f"API available at: http://localhost:{config.api_port}")
    print(f"Documentation at: http://localhost:{config.api_port}/docs")
    print()

    try:
        run_server(debug=False)
    except KeyboardInterrupt:
        print("\nShutting down Asset Ledger...")
    except Exception as e:
        print(f"Error starting server: {e}")
        sys.exit(1)
