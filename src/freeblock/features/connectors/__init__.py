"""
Connectors feature: geometry of the curved lines drawn between linked blocks.
"""
