def run(name="world", greeting="Hello"):
    """Greets someone."""
    return f"{greeting}, {name}!"
