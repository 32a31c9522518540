"""
Save inventory
Scans the save directory and groups .sav files by game, newest first.
Every call re-reads the directory; nothing is cached between requests.
"""

import logging
import os
import stat
from datetime import datetime
from typing import Dict, List, Optional

import humanize

from satisfactory_saves.core.save_parser import SAVE_EXTENSION, parse_save_filename

logger = logging.getLogger(__name__)

SAVE_TIME_FORMAT = "%a, %d %b %Y %H:%M:%S"


def build_inventory(save_dir) -> List[Dict]:
    """
    Build the list of games found in save_dir

    Each game is a dict with 'name' and 'saves'; saves are sorted by
    modification time, most recent first. The returned list has no
    defined order.

    Files that can't be stat'ed or whose names don't parse are skipped.
    An unreadable directory yields an empty inventory.
    """
    try:
        entries = os.listdir(save_dir)
    except OSError as e:
        logger.warning(f"Failed to list save directory {save_dir}: {e}")
        return []

    games = {}
    skipped = 0

    for file_name in entries:
        if not file_name.endswith(SAVE_EXTENSION):
            continue

        # Undecodable names come back with surrogate escapes and can't be linked
        try:
            file_name.encode("utf-8")
        except UnicodeEncodeError:
            logger.debug(f"Skipping save with non UTF-8 name: {file_name!r}")
            continue

        parsed = parse_save_filename(file_name)
        if parsed is None:
            continue

        save_path = os.path.join(save_dir, file_name)
        try:
            stats = os.stat(save_path)
        except OSError as e:
            logger.debug(f"Skipping {save_path}: {e}")
            skipped += 1
            continue

        if not stat.S_ISREG(stats.st_mode):
            continue

        game_name, save_type = parsed
        timestamp = datetime.fromtimestamp(stats.st_mtime)

        game = games.get(game_name)
        if game is None:
            game = {'name': game_name, 'saves': []}
            games[game_name] = game

        game['saves'].append({
            'filename': file_name,
            'type': save_type,
            'timestamp': timestamp,
            'size': stats.st_size,
            'save_time': timestamp.strftime(SAVE_TIME_FORMAT),
            'filesize': humanize.naturalsize(stats.st_size),
        })

    for game in games.values():
        game['saves'].sort(key=lambda x: x['timestamp'], reverse=True)

    logger.debug(f"Scanned {save_dir}: {len(games)} games, {skipped} unreadable files")
    return list(games.values())


def find_game(games, name) -> Optional[Dict]:
    """Return the game called name, or None"""
    return next((g for g in games if g['name'] == name), None)
