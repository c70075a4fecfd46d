"""Entry point.

Usage:
    python -m user_service run
    user-service run --port 3000
    user-service check-bus
"""

from user_service.main import app

app()
