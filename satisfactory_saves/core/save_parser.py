"""
Save filename parsing
Satisfactory names saves as <game>_<type>[_...].sav
"""

from typing import Optional, Tuple

SAVE_EXTENSION = ".sav"


def parse_save_filename(file_name: str) -> Optional[Tuple[str, str]]:
    """
    Split a save file's base name into (game_name, save_type)

    Returns None when the name has fewer than two '_' segments; such files
    are not saves and are simply left out of the listing.

    Underscores have no escaping, so "My_Factory_autosave.sav" reads as
    game "My" with type "Factory".
    """
    save_name = file_name
    if save_name.endswith(SAVE_EXTENSION):
        save_name = save_name[:-len(SAVE_EXTENSION)]

    parts = save_name.split("_")
    if len(parts) < 2:
        return None

    return parts[0], parts[1]
