"""
Link building for the save listing

Absolute links always use https and the request's Host header as given,
since they're handed to the external map viewer rather than followed by
the browser that made the request.
"""

from urllib.parse import quote

SAVES_PREFIX = "/saves"
LATEST_PREFIX = "/latest"
VIEWER_URL = "https://satisfactory-calculator.com/en/interactive-map?url={url}"


def download_url(file_name: str) -> str:
    return f"{SAVES_PREFIX}/{quote(file_name)}"


def full_url(host: str, file_name: str) -> str:
    return f"https://{host}{download_url(file_name)}"


def view_url(url: str) -> str:
    """Wrap an absolute save URL in the interactive map viewer link"""
    return VIEWER_URL.format(url=quote(url, safe=":/"))


def latest_url(host: str, game_name: str) -> str:
    return f"https://{host}{LATEST_PREFIX}/{quote(game_name)}"


def latest_view_url(host: str, game_name: str) -> str:
    return view_url(latest_url(host, game_name))


def attach_links(games, host):
    """
    Fill in the per-request links on every game and save

    Saves get 'download_url', 'full_url' and 'view_url'; games get
    'latest_download_url' and 'latest_view_url'. Games are updated in
    place and returned.
    """
    for game in games:
        game['latest_download_url'] = latest_url(host, game['name'])
        game['latest_view_url'] = latest_view_url(host, game['name'])

        for save in game['saves']:
            save['download_url'] = download_url(save['filename'])
            save['full_url'] = full_url(host, save['filename'])
            save['view_url'] = view_url(save['full_url'])

    return games
