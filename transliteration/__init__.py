"""transliteration — cyrylica serbska → łacinka, wielkie litery."""

from .mapper import Mapper, transliterate

__all__ = ["Mapper", "transliterate"]
