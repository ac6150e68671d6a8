import logging
from enum import Enum

logger = logging.getLogger(__name__)

BOARD_SIZE = 8
BOARD_AREA = BOARD_SIZE * BOARD_SIZE

MOVES = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2),
    (1, -2), (1, 2), (2, -1), (2, 1)
) # 八种跳法, 顺序固定


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


def within_board(row, col):
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def knight_targets(pos): # 棋盘内马能跳到的格子
    x, y = pos
    return [(x + dx, y + dy) for dx, dy in MOVES if within_board(x + dx, y + dy)]


def is_square(row, col): # bool 不算坐标
    return all(isinstance(v, int) and not isinstance(v, bool) for v in (row, col)) \
        and within_board(row, col)


class KnightTour:
    def __init__(self):
        self.listeners = [] # 状态变化回调
        self._init_state()

    def _init_state(self):
        self._position = None # 马的当前位置, 第一步之前为 None
        self._visited = [] # 走过的格子, 按步数顺序
        self._occupied = set()
        self._score = 0
        self._status = GameStatus.IN_PROGRESS

    @property
    def position(self):
        return self._position

    @property
    def visited(self):
        return list(self._visited)

    @property
    def score(self):
        return self._score

    @property
    def status(self):
        return self._status

    @property
    def is_over(self):
        return self._status is not GameStatus.IN_PROGRESS

    def legal_moves(self, pos=None): # 从 pos (默认当前位置) 出发可走的格子
        if pos is None:
            pos = self._position
        if pos is None:
            return []
        return [p for p in knight_targets(pos) if p not in self._occupied]

    def select_square(self, row, col): # 点击格子, 返回状态是否改变
        if self.is_over:
            logger.debug("Ignoring (%s, %s): game already %s", row, col, self._status.value)
            return False
        if not is_square(row, col):
            logger.debug("Ignoring off-board square (%r, %r)", row, col)
            return False

        target = (row, col)
        if self._position is None:
            self._go_to(target) # 第一步可以落在任意格子
        elif target in self.legal_moves():
            self._go_to(target)
            if not self.legal_moves(): # 无路可走
                self._status = GameStatus.WON if self._score == BOARD_AREA else GameStatus.LOST
                logger.info("Tour over: %s, score %d", self._status.value, self._score)
        else:
            logger.debug("Ignoring illegal move %s -> %s", self._position, target)
            return False

        self._check_invariants()
        self._notify()
        return True

    def _go_to(self, target):
        self._visited.append(target)
        self._occupied.add(target)
        self._position = target
        self._score += 1

    def reset(self): # 清空棋盘, 重新开始
        self._init_state()
        logger.info("Board reset")
        self._notify()

    def snapshot(self): # 供前端绘制的状态副本, 可直接 jsonify
        return {
            "position": list(self._position) if self._position else None,
            "visited": [list(p) for p in self._visited],
            "score": self._score,
            "status": self._status.value,
            "legal_moves": [] if self.is_over else [list(p) for p in self.legal_moves()],
            "board_size": BOARD_SIZE,
        }

    def subscribe(self, listener): # 注册回调, 返回取消函数
        self.listeners.append(listener)

        def unsubscribe():
            if listener in self.listeners:
                self.listeners.remove(listener)
        return unsubscribe

    def _notify(self):
        if not self.listeners:
            return
        state = self.snapshot()
        for listener in list(self.listeners):
            listener(state)

    def _check_invariants(self):
        assert self._score == len(self._visited), "score != number of visited squares"
        assert len(self._occupied) == len(self._visited), "square visited twice"
        assert self._position == (self._visited[-1] if self._visited else None)
