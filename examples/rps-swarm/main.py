"""
Rock / Paper / Scissors Swarm
Pygame front-end for the swarm engine: entities roam, bounce off the walls and
convert each other on contact.
"""

import logging
import sys

import pygame

from swarm import (
    ClearAll,
    CommandQueue,
    Engine,
    Kind,
    SpawnAt,
    SpawnRandom,
    SwarmConfig,
    make_command_system,
)
from swarm.entity import EntityView

# --- Configuration ---
WIDTH, HEIGHT = 900, 720
FPS = 60
TPS = 60
TITLE = "RPS Swarm Simulation"
ADD_BATCH = 10

BG_COLOR = (255, 255, 255)
HUD_COLOR = (0, 0, 0)
HINT_COLOR = (64, 64, 64)
KIND_COLORS = {
    Kind.ROCK: (120, 120, 120),
    Kind.PAPER: (244, 242, 232),
    Kind.SCISSORS: (220, 40, 90),
}


def _draw_rock(screen: pygame.Surface, cx: int, cy: int, r: int) -> None:
    pygame.draw.circle(screen, KIND_COLORS[Kind.ROCK], (cx, cy), r)
    pygame.draw.circle(screen, (64, 64, 64), (cx, cy), r, 2)


def _draw_paper(screen: pygame.Surface, cx: int, cy: int, r: int) -> None:
    w, h = int(r * 1.6), int(r * 1.9)
    rect = pygame.Rect(cx - w // 2, cy - h // 2, w, h)
    pygame.draw.rect(screen, KIND_COLORS[Kind.PAPER], rect)
    pygame.draw.rect(screen, (192, 192, 192), rect, 1)
    fold = [(rect.right - 6, rect.top), (rect.right, rect.top), (rect.right, rect.top + 6)]
    pygame.draw.polygon(screen, (230, 230, 230), fold)
    pygame.draw.polygon(screen, (128, 128, 128), fold, 1)


def _draw_scissors(screen: pygame.Surface, cx: int, cy: int, r: int) -> None:
    pygame.draw.line(screen, (64, 64, 64), (cx - r, cy - r), (cx + r, cy + r), 3)
    pygame.draw.line(screen, (64, 64, 64), (cx + r, cy - r), (cx - r, cy + r), 3)
    for hx, hy in ((cx - r + 1, cy - r + 1), (cx + r - 1, cy + r - 1)):
        pygame.draw.circle(screen, KIND_COLORS[Kind.SCISSORS], (hx, hy), 7)
        pygame.draw.circle(screen, (0, 0, 0), (hx, hy), 7, 1)


DRAWERS = {
    Kind.ROCK: _draw_rock,
    Kind.PAPER: _draw_paper,
    Kind.SCISSORS: _draw_scissors,
}


def _draw_entity(screen: pygame.Surface, view: EntityView) -> None:
    cx, cy = round(view.position[0]), round(view.position[1])
    r = round(view.radius)
    shadow = pygame.Surface((r * 2, r * 2), pygame.SRCALPHA)
    pygame.draw.circle(shadow, (0, 0, 0, 20), (r, r), r)
    screen.blit(shadow, (cx - r, cy - r))
    DRAWERS[view.kind](screen, cx, cy, r)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("sans", 18, bold=True)
    hint_font = pygame.font.SysFont("sans", 12)

    # --- Engine setup ---
    engine = Engine(SwarmConfig(width=WIDTH, height=HEIGHT), tps=TPS)
    queue = CommandQueue()
    engine.add_system(make_command_system(queue))
    engine.arena.reset()

    tick_acc = 0.0
    tick_interval = 1.0 / TPS
    running = True

    while running:
        dt = pg_clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    if engine.paused:
                        engine.resume()
                    else:
                        engine.pause()
                elif event.key == pygame.K_r:
                    engine.pause()
                    engine.arena.reset()
                elif event.key == pygame.K_a:
                    queue.enqueue(SpawnRandom(count=ADD_BATCH))
                elif event.key == pygame.K_c:
                    queue.enqueue(ClearAll())
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos
                queue.enqueue(SpawnAt(float(mx), float(my)))

        # --- Update ---
        # Commands still land while paused so clicks show up immediately.
        if engine.paused and queue.pending():
            queue.drain(engine.arena, engine.context())
        tick_acc += dt
        while tick_acc >= tick_interval:
            engine.step()
            tick_acc -= tick_interval

        # --- Draw ---
        screen.fill(BG_COLOR)
        snapshot = engine.arena.snapshot()
        for view in snapshot:
            _draw_entity(screen, view)

        counts = engine.arena.counts()
        pause_str = "   [PAUSED]" if engine.paused else ""
        text = (
            f"Rock: {counts[Kind.ROCK]}   Paper: {counts[Kind.PAPER]}   "
            f"Scissors: {counts[Kind.SCISSORS]}{pause_str}"
        )
        screen.blit(font.render(text, True, HUD_COLOR), (8, 6))
        hint = "Click=Add one  Space=Start/Pause  A=Add 10  R=Reset  C=Clear  Esc=Quit"
        screen.blit(hint_font.render(hint, True, HINT_COLOR), (8, HEIGHT - 20))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
