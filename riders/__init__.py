from .models import Rider

__all__ = ["Rider"]
