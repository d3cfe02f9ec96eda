import random
import unittest

from tetris_board import Cell
from tetris_gameplay import Command, GameOver, Gameplay, LinesUpdated
from tetris_piece import PieceKind, Point, spawn
from tetris_rng import PieceSource

from helpers import block


def only(kind):
    return lambda: kind


class GameplayTests(unittest.TestCase):
    def setUp(self):
        self.game = Gameplay(10, 20, only(PieceKind.T))

    def test_starts_with_spawned_piece(self):
        self.assertEqual(self.game.current_piece().points, spawn(PieceKind.T, 10).points)
        self.assertEqual(self.game.field().width, 10)
        self.assertEqual(self.game.field().height, 20)
        self.assertFalse(self.game.game_over)

    def test_default_piece_source(self):
        game = Gameplay()
        self.assertIsInstance(game.current_piece().kind, PieceKind)

    def test_tick_moves_down(self):
        before = self.game.current_piece().points
        self.assertEqual(self.game.on_tick(), [])
        after = self.game.current_piece().points
        self.assertEqual(after, tuple(Point(p.x, p.y + 1) for p in before))

    def test_wall_bounce_left(self):
        for _ in range(10):
            self.game.on_command(Command.MOVE_LEFT)
        piece = self.game.current_piece()
        self.assertEqual(min(p.x for p in piece.points), 0)
        before = piece.points
        self.assertEqual(self.game.on_command(Command.MOVE_LEFT), [])
        self.assertEqual(self.game.current_piece().points, before)

    def test_wall_bounce_right(self):
        for _ in range(10):
            self.game.on_command(Command.MOVE_RIGHT)
        self.assertEqual(max(p.x for p in self.game.current_piece().points), 9)

    def test_move_rolled_back_against_stack(self):
        self.game.on_tick()
        block(self.game.field(), 2, 2)
        before = self.game.current_piece().points
        self.game.on_command(Command.MOVE_LEFT)
        self.assertEqual(self.game.current_piece().points, before)

    def test_rotate(self):
        self.game.on_command(Command.ROTATE)
        piece = self.game.current_piece()
        self.assertEqual(piece.rotation_state, 1)
        self.assertEqual(piece.points, (Point(5, 1), Point(4, 0), Point(4, 1), Point(4, 2)))

    def test_rejected_rotate_keeps_piece(self):
        game = Gameplay(10, 20, only(PieceKind.I))
        piece = game.current_piece()
        before = piece.points
        game.on_command(Command.ROTATE)   # would poke above the hidden row
        self.assertIs(game.current_piece(), piece)
        self.assertEqual(piece.points, before)
        self.assertEqual(piece.rotation_state, 0)

    def test_rotate_rejected_at_wall(self):
        self.game.on_command(Command.ROTATE)
        for _ in range(10):
            self.game.on_command(Command.MOVE_LEFT)
        piece = self.game.current_piece()
        self.assertEqual(min(p.x for p in piece.points), 0)
        before = piece.points
        # the next state needs column -1
        self.game.on_command(Command.ROTATE)
        self.assertIs(self.game.current_piece(), piece)
        self.assertEqual(piece.points, before)
        self.assertEqual(piece.rotation_state, 1)

    def test_hard_drop(self):
        self.assertEqual(self.game.on_command(Command.HARD_DROP), [])
        piece = self.game.current_piece()
        field = self.game.field()
        self.assertEqual(max(p.y for p in piece.points), 20)
        self.assertTrue(field.can_place(piece))
        self.assertTrue(field.is_landed(piece))
        self.assertEqual(field.count(Cell.BLOCK), 0)

    def test_hard_drop_onto_stack(self):
        block(self.game.field(), 4, 20)
        self.game.on_command(Command.HARD_DROP)
        self.assertEqual(max(p.y for p in self.game.current_piece().points), 19)

    def test_tick_locks_landed_piece(self):
        self.game.on_command(Command.HARD_DROP)
        dropped = self.game.current_piece()
        self.assertEqual(self.game.on_tick(), [])
        field = self.game.field()
        self.assertEqual(field.count(Cell.BLOCK), 4)
        for p in dropped.points:
            self.assertIs(field.cell(p.y - 1, p.x), Cell.BLOCK)
        self.assertIsNot(self.game.current_piece(), dropped)
        self.assertEqual(self.game.current_piece().points, spawn(PieceKind.T, 10).points)

    def test_line_clear(self):
        game = Gameplay(4, 4, only(PieceKind.O))
        block(game.field(), 0, 4)
        block(game.field(), 3, 4)
        game.on_command(Command.HARD_DROP)

        events = game.on_tick()

        self.assertEqual(events, [LinesUpdated([3], [0, 1, 2, 3])])
        field = game.field()
        self.assertEqual(field.line(3), [Cell.EMPTY, Cell.BLOCK, Cell.BLOCK, Cell.EMPTY])
        self.assertEqual(field.count(Cell.BLOCK), 2)
        self.assertEqual(game.lines_cleared, 1)
        self.assertFalse(game.game_over)

    def test_game_over(self):
        game = Gameplay(4, 2, only(PieceKind.O))
        self.assertEqual(game.on_tick(), [])
        events = game.on_tick()
        self.assertEqual(events, [GameOver()])
        self.assertTrue(game.game_over)

        piece = game.current_piece()
        before = piece.points
        self.assertEqual(game.on_tick(), [])
        self.assertEqual(game.on_command(Command.MOVE_LEFT), [])
        self.assertEqual(game.on_command(Command.HARD_DROP), [])
        self.assertEqual(piece.points, before)

    def test_stacking_to_the_top(self):
        game = Gameplay(10, 4, only(PieceKind.T))
        events = []
        for _ in range(50):
            events += game.on_tick()
            if game.game_over:
                break
        self.assertTrue(game.game_over)
        self.assertEqual(events, [GameOver()])
        self.assertEqual(game.field().count(Cell.BLOCK), 8)

    def test_random_play_stays_in_bounds(self):
        game = Gameplay(10, 20, PieceSource(seed=7).next_kind)
        rng = random.Random(3)
        top = str(game.field()).splitlines()[0]
        for _ in range(2000):
            if game.game_over:
                break
            if rng.random() < 0.3:
                game.on_tick()
            else:
                game.on_command(rng.choice(list(Command)))
            if not game.game_over:
                piece = game.current_piece()
                self.assertTrue(game.field().can_place(piece))
                for p in piece.points:
                    self.assertTrue(0 <= p.x < 10)
                    self.assertTrue(0 <= p.y <= 20)
            # hidden row: never empty cells, and settled blocks there never move
            row0 = str(game.field()).splitlines()[0]
            self.assertNotIn(".", row0)
            for before, now in zip(top, row0):
                if before == "#":
                    self.assertEqual(now, "#")
            top = row0

    def test_lock_into_hidden_row(self):
        block(self.game.field(), 0, 2)
        for _ in range(3):
            self.game.on_command(Command.MOVE_LEFT)
        self.assertEqual(self.game.on_tick(), [])
        self.assertFalse(self.game.game_over)
        self.assertEqual(str(self.game.field()).splitlines()[0], " #        ")
        self.assertTrue(self.game.field().can_place(self.game.current_piece()))

    def test_clear_with_blocks_in_hidden_row(self):
        game = Gameplay(4, 4, only(PieceKind.T))
        field = game.field()
        block(field, 3, 1)
        block(field, 0, 2)

        events = game.on_tick()

        self.assertEqual(events, [LinesUpdated([0], [0]), GameOver()])
        self.assertEqual(str(field).splitlines()[0], " #  ")
        self.assertEqual(field.line(0), [Cell.EMPTY] * 4)
        self.assertEqual(field.line(1), [Cell.BLOCK, Cell.EMPTY, Cell.EMPTY, Cell.EMPTY])


if __name__ == "__main__":
    unittest.main()
