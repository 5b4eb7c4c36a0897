"""
WebSocket Package

Contains the Flask-SocketIO keystroke channel.
"""
