"""Local multiplayer space combat arcade game built on pygame."""

__version__ = "0.1.0"
__all__ = [
    "app",
    "collision",
    "delegate",
    "entities",
    "game",
    "gameobject",
    "hud",
    "input",
    "physics",
    "player",
    "registry",
    "vecmath",
]