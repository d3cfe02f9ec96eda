import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_gameplay import GameOver, Gameplay, LinesUpdated
from tetris_input import ShiftRepeat, decode_key
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import PieceSource
from tetris_ticker import AcceleratingTicker

log = logging.getLogger("tetris")


def new_game():
    source = PieceSource(CONFIG["SEED"])
    return Gameplay(CONFIG["WIDTH"], CONFIG["HEIGHT"], source.next_kind)


def dirty_rows(locked, events):
    """Playable rows to repaint after a tick that locked ``locked``."""
    rows = {p.y - 1 for p in locked.points if p.y >= 1}
    for e in events:
        if isinstance(e, LinesUpdated):
            rows.update(e.changed)
    return sorted(rows)


def run():
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    game = new_game()
    dims = compute_dims(game.field())
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    clock = pygame.time.Clock()

    render = RenderAssets(dims, font)
    render.rebuild_board_surface(game.field())
    ticker = AcceleratingTicker()
    shift = ShiftRepeat()
    log.info("session started (%dx%d)", dims.cols, dims.rows)

    while True:
        dt = clock.tick(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE):
                log.info("quit")
                return
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_r:
                    log.info("restart")
                    game = new_game()
                    render.rebuild_board_surface(game.field())
                    ticker = AcceleratingTicker()
                    continue
                cmd = decode_key(e.key)
                if cmd is not None:
                    game.on_command(cmd)

        if not game.game_over:
            keys = pygame.key.get_pressed()
            cmd = shift.update(dt, keys[pygame.K_LEFT], keys[pygame.K_RIGHT])
            if cmd is not None:
                game.on_command(cmd)

            for _ in range(ticker.update(dt)):
                piece = game.current_piece()
                events = game.on_tick()
                if game.current_piece() is not piece:
                    render.redraw_rows(game.field(), dirty_rows(piece, events))
                if any(isinstance(ev, GameOver) for ev in events):
                    break

        render.draw(screen, game)
        if game.game_over:
            render.draw_game_over(screen, big_font)
        pygame.display.flip()


def main():
    logging.basicConfig(
        stream=sys.stderr,
        level=CONFIG["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        run()
    finally:
        pygame.quit()


if __name__ == '__main__':
    main()
