def shout(name="world", greeting="Hello"):
    return f"{greeting}, {name}!".upper()
