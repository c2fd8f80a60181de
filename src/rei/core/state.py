# src/rei/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (rei.config.Settings or a test stand-in).
    settings: object

    tasks: TaskList
    store: TaskRepo

    @property
    def app_name(self) -> str:
        return str(getattr(self.settings, "app_name", "Rei"))
