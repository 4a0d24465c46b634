def wave(name="world"):
    """Waves at someone."""
    return f"*waves at {name}*"
