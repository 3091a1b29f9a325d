# autopresenter/encoders.py
import json
from typing import Any

from .presentable import SupportsPresentation

__all__ = ["PresenterJSONEncoder"]


class PresenterJSONEncoder(json.JSONEncoder):
    """JSON encoder that serializes presenters (and presentable models) via `to_dict()`."""

    def default(self, o: Any) -> Any:
        if isinstance(o, SupportsPresentation):
            return o.to_dict()
        return super().default(o)
