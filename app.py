import threading
import uuid
from collections import OrderedDict

from flask import Flask, request, jsonify, render_template, make_response

from config import Config, setup_logging
from tour import KnightTour

app = Flask(__name__)
app.config.from_object(Config)


class GameRegistry: # 每个用户一盘棋, 只保存在内存里
    def __init__(self):
        self.games = OrderedDict()
        self.lock = threading.Lock()

    def get(self, uid):
        game = self.games.get(uid)
        if game is None:
            game = KnightTour()
            self.games[uid] = game
            while len(self.games) > app.config["MAX_GAMES"]: # 淘汰最久未使用的棋局
                old_uid, _ = self.games.popitem(last=False)
                app.logger.info("Evicted game of user %s", old_uid)
        else:
            self.games.move_to_end(uid)
        return game

    def clear(self):
        with self.lock:
            self.games.clear()

    def __len__(self):
        return len(self.games)


games = GameRegistry()


def current_uid():
    return request.cookies.get(app.config["USER_COOKIE"])


def respond(payload, uid, status=200): # 统一返回, 没有用户标识时补发 cookie
    response = make_response(jsonify(payload), status)
    if current_uid() != uid:
        response.set_cookie(app.config["USER_COOKIE"], uid)
    return response


@app.route('/')
def index(): # 主页面
    uid = current_uid()
    if not uid:
        uid = str(uuid.uuid4())
    response = make_response(render_template('index.html'))
    response.set_cookie(app.config["USER_COOKIE"], uid)
    return response


@app.route('/api/state', methods=['GET'])
def get_state(): # 当前棋盘状态
    uid = current_uid() or str(uuid.uuid4())
    with games.lock:
        state = games.get(uid).snapshot()
    return respond({'success': True, 'state': state}, uid)


@app.route('/api/select', methods=['POST'])
def select_square(): # 点击格子: 放马或走一步
    uid = current_uid() or str(uuid.uuid4())
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        app.logger.warning("Select request without a JSON object from %s", uid)
        return respond({'success': False, 'message': 'Request body must be a JSON object'}, uid, 400)

    row = data.get('row')
    col = data.get('col')
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in (row, col)):
        app.logger.warning("Select request with bad coordinates %r, %r from %s", row, col, uid)
        return respond({'success': False, 'message': 'row and col must be integers'}, uid, 400)

    with games.lock:
        game = games.get(uid)
        moved = game.select_square(row, col)
        state = game.snapshot()
    return respond({'success': True, 'moved': moved, 'state': state}, uid)


@app.route('/api/reset', methods=['POST'])
def reset_game(): # Play Again
    uid = current_uid() or str(uuid.uuid4())
    with games.lock:
        game = games.get(uid)
        game.reset()
        state = game.snapshot()
    return respond({'success': True, 'state': state}, uid)


if __name__ == '__main__':
    setup_logging(app.config["LOG_LEVEL"])
    app.run(debug=app.config["DEBUG"], port=app.config["PORT"])
