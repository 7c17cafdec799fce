"""
OpenCV front end: configuration, renderer, window and entry point.
"""
