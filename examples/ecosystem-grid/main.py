"""
Ecosystem Grid - pygame viewer for the ecosim simulator

Draws every cell of the field as a coloured square, one colour per species,
with a status line showing the tick, the time of day and the population.
The renderer is an ordinary simulator observer; the pygame loop only decides
when to step.

Run: python examples/ecosystem-grid/main.py [--seed N] [--music FILE]
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from ecosim import Grid, SimulationConfig, Simulator, Species

TITLE = "Ecosystem Grid - ecosim"
CELL = 6
HUD_HEIGHT = 44
FPS = 60
TPS = 1000 / 15  # one tick per 15 ms, matching the classic pacing
BG_COLOR = (255, 255, 255)
NIGHT_COLOR = (215, 220, 235)
HUD_COLOR = (30, 30, 40)

SPECIES_COLORS: dict[Species, tuple[int, int, int]] = {
    Species.HEDGEHOG: (255, 165, 0),
    Species.COYOTE: (40, 80, 220),
    Species.SNAKE: (220, 30, 30),
    Species.FROG: (40, 170, 60),
    Species.BIRD: (64, 64, 64),
}


class GridView:
    """Observer that paints the grid and keeps the latest status line."""

    def __init__(self, sim: Simulator, screen: pygame.Surface, font: pygame.font.Font) -> None:
        self.sim = sim
        self.screen = screen
        self.font = font
        self.tick = 0
        self.progress = 0.0
        self.cycle_length = sim.clock.cycle_length

    def __call__(self, tick: int, grid: Grid, progress: float, cycle_length: int) -> None:
        self.tick = tick
        self.progress = progress
        self.cycle_length = cycle_length

    def draw(self, paused: bool, fps_val: float) -> None:
        night = self.progress >= 0.5
        self.screen.fill(NIGHT_COLOR if night else BG_COLOR)

        for loc, occupant in self.sim.grid.occupied():
            color = SPECIES_COLORS[occupant.species]
            rect = (loc.col * CELL, HUD_HEIGHT + loc.row * CELL, CELL, CELL)
            pygame.draw.rect(self.screen, color, rect)

        self._draw_hud(paused, fps_val)

    def _draw_hud(self, paused: bool, fps_val: float) -> None:
        counts = self.sim.counts()
        pause_str = "  [PAUSED]" if paused else ""
        ended = "" if self.sim.viable else "  [NOT VIABLE]"
        population = "  ".join(f"{s.value.title()}: {counts[s]}" for s in Species)
        lines = [
            f"Step: {self.tick}   Time: {self.progress:.2f} of {self.cycle_length}   "
            f"FPS: {fps_val:.0f}{pause_str}{ended}",
            f"Population: {population}",
        ]
        for i, line in enumerate(lines):
            surf = self.font.render(line, True, HUD_COLOR)
            self.screen.blit(surf, (8, 4 + i * 18))


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="pygame viewer for ecosim")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--depth", type=int, default=70)
    parser.add_argument("--width", type=int, default=120)
    parser.add_argument("--music", default=None, help="audio file looped while running")
    return parser.parse_args()


def start_music(path: str) -> None:
    try:
        pygame.mixer.init()
        pygame.mixer.music.load(path)
        pygame.mixer.music.play(-1)
    except pygame.error as exc:
        logging.getLogger(__name__).warning("music disabled: %s", exc)


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)

    config = SimulationConfig.create(depth=args.depth, width=args.width)

    pygame.init()
    screen = pygame.display.set_mode(
        (config.width * CELL, config.depth * CELL + HUD_HEIGHT)
    )
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)
    if args.music:
        start_music(args.music)

    def build() -> tuple[Simulator, GridView]:
        sim = Simulator(config, seed=args.seed)
        view = GridView(sim, screen, font)
        sim.add_observer(view)
        return sim, view

    sim, view = build()
    paused = False
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
                    paused = not paused
                elif event.key == pygame.K_s and paused:
                    sim.step()
                elif event.key == pygame.K_r:
                    sim, view = build()
                    tick_acc = 0.0

        # --- Update (tick accumulator) ---
        if not paused and sim.viable:
            tick_acc += dt
            while tick_acc >= tick_interval and sim.viable:
                sim.step()
                tick_acc -= tick_interval

        # --- Draw ---
        view.draw(paused, pg_clock.get_fps())
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
