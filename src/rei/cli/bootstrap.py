# src/rei/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes settings, builds the task store
for the configured file and loads the initial task list into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings(). StorageError and
    CorruptDataError from the first load propagate: startup cannot continue
    without a readable task file.
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.tasks_file_path)
    tasks = TaskList(store.load())
    logger.info("State ready file=%s tasks=%d", store.path, tasks.size())

    return AppState(settings=settings, tasks=tasks, store=store)
