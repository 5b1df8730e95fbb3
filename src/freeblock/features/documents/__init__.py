"""
Documents feature: export and import of the block graph as a JSON document.
"""
