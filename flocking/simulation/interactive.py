"""
Interactive simulation with pygame GUI.
"""

import random
from typing import Optional

import pygame

from ..core.config import FlockConfig, DEFAULT_CONFIG
from ..core.flock import Flock
from ..core.vector import Vector2


class Simulation:
    """
    Interactive flocking window.

    Owns the clock: one ``Flock.step()`` per frame, then every boid is drawn
    as a filled circle in its group color.
    """

    def __init__(self, config: Optional[FlockConfig] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize the simulation.

        Args:
            config: Flock configuration (uses a copy of the defaults if None)
            rng: Random source for seeding the flock

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config if config is not None else DEFAULT_CONFIG.copy()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.flock = Flock(self.config, rng=self.rng)

        pygame.init()
        self.screen = pygame.display.set_mode(
            (int(self.config.worldWidth), int(self.config.worldHeight))
        )
        pygame.display.set_caption("Flocking")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 22)

        self.running = True
        self.paused = False

    def update(self) -> None:
        """Advance the flock one tick unless paused."""
        if not self.paused:
            self.flock.step()

    def draw(self) -> None:
        """Render the current frame."""
        self.screen.fill(self.config.backgroundColor)

        for target in self.flock.targets:
            pygame.draw.circle(self.screen, self.config.targetColor,
                               (int(target.x), int(target.y)), 6, 2)

        for agent in self.flock.snapshot():
            pygame.draw.circle(self.screen, pygame.Color(agent.color),
                               (int(agent.x), int(agent.y)), int(agent.radius))

        self._draw_stats()
        pygame.display.flip()

    def _draw_stats(self) -> None:
        """Draw statistics overlay."""
        stats_text = [
            f"FPS: {int(self.clock.get_fps())}",
            f"Agents: {len(self.flock)}",
            f"Tick: {self.flock.tick}",
            f"Targets: {len(self.flock.targets)}",
        ]
        if self.paused:
            stats_text.append("PAUSED")

        y_offset = 10
        for text in stats_text:
            surface = self.font.render(text, True, (90, 90, 90))
            self.screen.blit(surface, (10, y_offset))
            y_offset += 20

    def reseed(self) -> None:
        """Replace the flock with a freshly seeded one, keeping targets."""
        targets = self.flock.targets
        self.flock = Flock(self.config, rng=self.rng)
        for target in targets:
            self.flock.add_target(target)
        print(f"Flock reseeded with {len(self.flock)} agents")

    def run(self) -> None:
        """Run the simulation main loop."""
        try:
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        self._handle_keydown(event.key)
                    elif event.type == pygame.MOUSEBUTTONDOWN:
                        self._handle_click(event.button, event.pos)

                self.update()
                self.draw()
                self.clock.tick(self.config.fpsTarget)
        finally:
            pygame.quit()

    def _handle_keydown(self, key: int) -> None:
        """Handle keyboard input."""
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_SPACE:
            self.paused = not self.paused
            print(f"Simulation: {'PAUSED' if self.paused else 'RUNNING'}")
        elif key == pygame.K_r:
            self.reseed()

    def _handle_click(self, button: int, pos) -> None:
        """Left click adds a seek target, right click clears them."""
        if button == 1:
            self.flock.add_target(Vector2(pos[0], pos[1]))
            print(f"Seek target added at {pos}")
        elif button == 3:
            self.flock.clear_targets()
            print("Seek targets cleared")
