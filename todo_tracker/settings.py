"""Application settings persisted in ``data/settings.json``."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field

from todo_tracker.domain.models import DEFAULT_TAG_VOCABULARY
from todo_tracker.utils import get_base_path, get_data_dir


logger = logging.getLogger(__name__)

BLANK_TITLE_POLICIES = ("ignore", "raise")
REMOTE_ERROR_POLICIES = ("log", "raise")
MIN_WORKERS = 1
MAX_WORKERS = 16
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 1000


@dataclass(slots=True)
class AppSettings:
    project_id: str = ""
    database_id: str = "(default)"
    collection: str = "todos"
    credentials_path: str = field(default_factory=lambda: os.path.join(get_base_path(), "credentials.json"))
    token_path: str = field(default_factory=lambda: os.path.join(get_base_path(), "token.json"))
    remote_enabled: bool = True
    tags_enabled: bool = True
    tag_vocabulary: tuple[str, ...] = DEFAULT_TAG_VOCABULARY
    blank_title_policy: str = "ignore"
    remote_error_policy: str = "log"
    max_workers: int = 4
    page_size: int = 300

    @property
    def strict_titles(self) -> bool:
        return self.blank_title_policy == "raise"

    @property
    def raise_remote_errors(self) -> bool:
        return self.remote_error_policy == "raise"


def _clamp_int(value: object, default: int, low: int, high: int) -> int:
    try:
        number = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        number = default
    return max(low, min(high, number))


def _text(value: object, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _flag(value: object, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def _choice(value: object, choices: tuple[str, ...], default: str) -> str:
    return value if value in choices else default


class SettingsStore:
    """Load/save AppSettings as JSON; unknown or invalid values fall back to defaults."""

    def __init__(self, path: str | None = None):
        self.path = path or os.path.join(get_data_dir(), "settings.json")

    def load(self) -> AppSettings:
        defaults = AppSettings()
        if not os.path.exists(self.path):
            return defaults

        try:
            with open(self.path, "r", encoding="utf-8") as file:
                payload = json.load(file)
        except (OSError, json.JSONDecodeError):
            logger.exception("Failed to read settings from %s; using defaults.", self.path)
            return defaults

        if not isinstance(payload, dict):
            return defaults

        vocabulary_raw = payload.get("tag_vocabulary")
        if isinstance(vocabulary_raw, list) and vocabulary_raw:
            # dict.fromkeys keeps first-seen order while deduplicating
            vocabulary = tuple(dict.fromkeys(str(tag) for tag in vocabulary_raw if str(tag).strip()))
        else:
            vocabulary = defaults.tag_vocabulary

        return AppSettings(
            project_id=_text(payload.get("project_id"), defaults.project_id),
            database_id=_text(payload.get("database_id"), defaults.database_id),
            collection=_text(payload.get("collection"), defaults.collection),
            credentials_path=_text(payload.get("credentials_path"), defaults.credentials_path),
            token_path=_text(payload.get("token_path"), defaults.token_path),
            remote_enabled=_flag(payload.get("remote_enabled"), defaults.remote_enabled),
            tags_enabled=_flag(payload.get("tags_enabled"), defaults.tags_enabled),
            tag_vocabulary=vocabulary or defaults.tag_vocabulary,
            blank_title_policy=_choice(payload.get("blank_title_policy"), BLANK_TITLE_POLICIES, defaults.blank_title_policy),
            remote_error_policy=_choice(
                payload.get("remote_error_policy"), REMOTE_ERROR_POLICIES, defaults.remote_error_policy
            ),
            max_workers=_clamp_int(payload.get("max_workers"), defaults.max_workers, MIN_WORKERS, MAX_WORKERS),
            page_size=_clamp_int(payload.get("page_size"), defaults.page_size, MIN_PAGE_SIZE, MAX_PAGE_SIZE),
        )

    def save(self, settings: AppSettings) -> None:
        payload = asdict(settings)
        payload["tag_vocabulary"] = list(settings.tag_vocabulary)
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as file:
            json.dump(payload, file, ensure_ascii=False, indent=2)
