from app.model.badges import Badge
from app.model.completions import Completion

__all__ = ["Badge", "Completion"]
