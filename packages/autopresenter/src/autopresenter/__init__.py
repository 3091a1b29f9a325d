# autopresenter/__init__.py
from .decorator import Decorator
from .encoders import PresenterJSONEncoder
from .presentable import Presentable, SupportsPresentation
from .presenter import PresentedAttribute, Presenter, presents

__all__ = [
    "Decorator",
    "Presentable",
    "PresentedAttribute",
    "Presenter",
    "PresenterJSONEncoder",
    "SupportsPresentation",
    "presents",
]
