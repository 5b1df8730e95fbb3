"""
Blocks feature: the Block entity and the graph store built around it.
"""
