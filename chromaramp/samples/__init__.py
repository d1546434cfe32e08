from .stops import RAINBOW_STOPS, RED_GLOW_STOPS, BLACK, WHITE, RED, BLUE

__all__ = ["RAINBOW_STOPS", "RED_GLOW_STOPS", "BLACK", "WHITE", "RED", "BLUE"]
