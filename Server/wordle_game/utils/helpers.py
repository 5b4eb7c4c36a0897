"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict
from flask import request


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None),  # Set for WebSocket requests
    }
