import pytest

import config
from app import app, games
from tour import BOARD_SIZE, MOVES, within_board


class TourSolver: # 深度优先搜索一条完整路线, 只在测试中用来构造获胜局面
    def __init__(self, start):
        self.n = BOARD_SIZE
        self.board = [[0] * self.n for _ in range(self.n)]
        self.current_pos = start
        self.board[start[0]][start[1]] = 1
        self.path = [start] # 走过的格子
        self.steps = self.n * self.n - 1 # 还需要完成的步数

    def go_back(self):
        x, y = self.path.pop()
        self.board[x][y] = 0
        self.current_pos = self.path[-1]
        self.steps += 1

    def go_ahead(self, pos):
        self.path.append(pos)
        self.current_pos = pos
        self.board[pos[0]][pos[1]] = 1
        self.steps -= 1

    def free(self, x, y):
        return within_board(x, y) and self.board[x][y] == 0

    def next_moves(self): # Warnsdorff: 后续可走路线最少的优先
        moves = []
        x, y = self.current_pos
        for dx, dy in MOVES:
            nx, ny = x + dx, y + dy
            if self.free(nx, ny):
                ways = sum(1 for dx2, dy2 in MOVES if self.free(nx + dx2, ny + dy2))
                moves.append(((nx, ny), ways))
        return sorted(moves, key=lambda m: m[-1])

    def solve(self):
        if self.steps == 0:
            return True
        for pos, _ in self.next_moves():
            self.go_ahead(pos)
            if self.solve(): return True
            self.go_back()
        return False


@pytest.fixture
def full_tour():
    solver = TourSolver((0, 0))
    assert solver.solve()
    return list(solver.path)


@pytest.fixture
def client():
    app.config.from_object(config.TestConfig)
    games.clear()
    yield app.test_client()
    games.clear()
