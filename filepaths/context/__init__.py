"""
# Function and data structure tools used by local packages.
"""
