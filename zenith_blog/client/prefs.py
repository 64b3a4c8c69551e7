# zenith_blog/client/prefs.py
import json
import logging
from pathlib import Path

from zenith_blog.client.view_state import SORT_KEYS, THEMES, ViewState

logger = logging.getLogger(__name__)


class PreferenceStore:
    """
    Keeps favorites, theme and sort key in a small JSON file between runs.
    A broken or unreadable file is logged and ignored; preferences are never
    worth failing over.
    """

    def __init__(self, path: Path):
        self.path: Path = Path(path)

    def load_into(self, state: ViewState) -> ViewState:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return state
        except (OSError, ValueError) as e:
            logger.warning(f"Preference read failed ({self.path}): {e}")
            return state

        favorites = raw.get("favorites")
        if isinstance(favorites, list):
            state.favorites = [str(f) for f in favorites]
        if raw.get("theme") in THEMES:
            state.theme = raw["theme"]
        if raw.get("sort_by") in SORT_KEYS:
            state.sort_by = raw["sort_by"]
        return state

    def save(self, state: ViewState) -> None:
        data = {
            "favorites": state.favorites,
            "theme": state.theme,
            "sort_by": state.sort_by,
        }
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning(f"Preference write failed ({self.path}): {e}")
