"""Running a backup as a queue of actions."""

from __future__ import annotations

import logging
import random
import time
from collections import deque
from datetime import timedelta
from pathlib import Path
from typing import Callable

import requests

from .actions import BackupAction, BootstrapAction, JiggleStrategy
from .auth import get_authenticated_client
from .local_backup import LocalBackupStructure
from .models import FrameAssetsResponse, FrameId, FramesResponse

_log = logging.getLogger(__name__)


class BackupManager:
    """State of a backup run and the queue of actions still to apply."""

    def __init__(
        self,
        save_dir: Path | str,
        delay: timedelta,
        jiggle: timedelta = timedelta(0),
        jiggle_strategy: JiggleStrategy = JiggleStrategy.NORMAL,
        *,
        rng: random.Random | None = None,
        session_factory: Callable[[], requests.Session] = get_authenticated_client,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self.delay = delay
        self.jiggle = jiggle
        self.jiggle_strategy = jiggle_strategy
        self.frames: FramesResponse | None = None
        self.frame_assets: dict[FrameId, FrameAssetsResponse] = {}
        self.local_backup_structure = LocalBackupStructure(Path(save_dir))
        self.stack: deque[BackupAction] = deque([BootstrapAction()])
        self.rng = rng if rng is not None else random.Random()
        self.session_factory = session_factory
        self.sleep = sleep

    def run(self) -> None:
        """Apply queued actions front to back until the queue is empty."""
        while self.stack:
            action = self.stack.popleft()
            remaining = ",".join(str(entry) for entry in self.stack)
            _log.info("Running action %s, remaining: %s", action, remaining)
            action.apply(self)