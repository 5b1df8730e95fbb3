"""
Links feature: user-facing link intents layered over block link tables.
"""
