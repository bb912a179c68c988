"""Shared application settings read from environment variables."""

import os

# Rejection-sampling cap used when a caller does not supply one.
BOARD_MAX_ATTEMPTS: int = int(os.environ.get('BOARD_MAX_ATTEMPTS', '150000'))
LOG_LEVEL: str = os.environ.get('LOG_LEVEL', 'INFO').upper()
