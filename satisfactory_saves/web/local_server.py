import logging

from flask import Flask, render_template, redirect, request, send_from_directory
from flask_cors import CORS
from jinja2 import TemplateError

from satisfactory_saves.core.inventory import build_inventory, find_game
from satisfactory_saves.core.urls import attach_links, full_url

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = "404 Page Not Found\n"
METHOD_NOT_ALLOWED_BODY = "405 Method Not Allowed\n"
SERVER_ERROR_BODY = "500 Internal Server Error\n"
TEXT_PLAIN = {'Content-Type': 'text/plain; charset=utf-8'}


def create_app(config):
    """
    Build the Flask app serving the saves in config.save_dir

    The config is captured by the route functions; nothing is read from
    module globals, and every request rescans the directory.
    """
    app = Flask(__name__, static_folder=None)
    app.config['SAVE_CONFIG'] = config
    CORS(app)  # The map viewer fetches saves from the browser

    @app.errorhandler(404)
    def not_found(error):
        return NOT_FOUND_BODY, 404, TEXT_PLAIN

    @app.errorhandler(405)
    def method_not_allowed(error):
        return METHOD_NOT_ALLOWED_BODY, 405, TEXT_PLAIN

    @app.errorhandler(500)
    def server_error(error):
        return SERVER_ERROR_BODY, 500, TEXT_PLAIN

    @app.route('/', methods=['GET'])
    def index():
        """List every game and its saves"""
        games = attach_links(build_inventory(config.save_dir), request.host)
        games.sort(key=lambda g: g['name'])

        try:
            return render_template('list.html', games=games)
        except TemplateError:
            logger.exception("Failed to render save listing")
            return SERVER_ERROR_BODY, 500, TEXT_PLAIN

    @app.route('/latest/<game_name>', methods=['GET'])
    def latest(game_name):
        """Redirect to the most recent save of a game"""
        game = find_game(build_inventory(config.save_dir), game_name)
        if not game:
            return NOT_FOUND_BODY, 404, TEXT_PLAIN

        newest = game['saves'][0]
        logger.debug(f"Latest save for {game_name}: {newest['filename']}")
        return redirect(full_url(request.host, newest['filename']), code=302)

    @app.route('/saves/<path:file_name>', methods=['GET'])
    def download(file_name):
        """Serve a raw save file"""
        return send_from_directory(config.save_dir, file_name)

    return app


def run_server(config):
    """Serve until interrupted, one thread per request"""
    app = create_app(config)
    logger.info(f"Serving saves from {config.save_dir} on http://{config.bind_address}")
    app.run(host=config.ip, port=config.port, debug=False, use_reloader=False, threaded=True)
