from .formatter import GAME_NAME, GLYPHS, format_row, format_share, share_text

__all__ = ["GAME_NAME", "GLYPHS", "format_row", "format_share", "share_text"]
