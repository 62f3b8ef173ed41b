#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import argparse
import logging
import os
import tkinter as tk

from forest_focus.services.audio_service import AudioService
from forest_focus.services.timer_service import TimerService
from forest_focus.storage.db import Database
from forest_focus.storage.paths import default_db_path
from forest_focus.storage.repos import AppStateRepo, StateStore
from forest_focus.ui.main_window import MainWindow
from forest_focus.ui.tk_frames import TkFrameScheduler

LOG_LEVEL_ENV_VAR = "FOREST_FOCUS_LOG_LEVEL"

logger = logging.getLogger("forest_focus")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="forest-focus",
        description="Pomodoro timer with a growing plant.",
    )
    parser.add_argument(
        "--db",
        metavar="PATH",
        default=None,
        help="sqlite file for saved state (default: per-user data dir)",
    )
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        default=os.environ.get(LOG_LEVEL_ENV_VAR, "INFO"),
        help="DEBUG, INFO, WARNING or ERROR",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="forget the saved timer and sound settings before starting",
    )
    return parser


def open_player():
    """Audio output, or None when PortAudio is not available."""
    try:
        from forest_focus.services.audio_output import SoundDevicePlayer
    except OSError as e:
        logger.warning("audio disabled: %s", e)
        return None
    return SoundDevicePlayer()


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    db = Database.open_or_memory(args.db or default_db_path())

    store = StateStore(AppStateRepo(db))
    if args.reset:
        logger.info("clearing saved state")
        store.clear()

    root = tk.Tk()
    timer_service = TimerService(store, TkFrameScheduler(root))
    audio_service = AudioService(store, player=open_player())
    timer_service.subscribe_session_completed(audio_service.on_session_completed)

    app = MainWindow(root, timer_service, audio_service)
    audio_service.start()
    try:
        app.run()
    finally:
        db.close()


if __name__ == "__main__":
    main()
