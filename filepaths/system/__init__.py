"""
# Backend tagged paths and the filesystem operations that they drive.
"""
