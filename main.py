import logging
from multiprocessing import Manager, Process

import numpy as np
import pygame

import constants
import gui_controller as gui_ctrl
from constants import BLACK, FPS, HEIGHT, TITLE, UI_MAX_PARTICLES, WHITE, WIDTH
from particle_sim.Vec2 import Vec2
from particle_sim.controls import apply_controls, default_controls
from particle_sim.emitter import Emitter
from particle_sim.logging_config import setup_logging
from particle_sim.render import draw_emitters, draw_particles
from particle_sim.simulator import Simulator

logger = logging.getLogger("particle_sim")


def create_simulator(rng):
    """Simulator covering the whole window, seeded with the two demo emitters."""
    simulator = Simulator(UI_MAX_PARTICLES, 0, WIDTH, 0, HEIGHT)
    # bottom left: fixed launch velocity, big particles
    simulator.add_emitter(Emitter(Vec2(200, HEIGHT - 200), Vec2(0.1, -0.15), particles_per_second=16,
                                  particle_max_radius=90, randomise_initial_velocity=False, rng=rng))
    # centre: jittered launch velocity
    simulator.add_emitter(Emitter(Vec2(WIDTH / 2 + 50, HEIGHT / 2 - 10), Vec2(-0.2, -0.2), particles_per_second=15,
                                  particle_max_radius=30, randomise_initial_velocity=True, rng=rng))
    return simulator


def main():
    setup_logging()

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 32)

    rng = np.random.default_rng(constants.SEED)
    simulator = create_simulator(rng)

    running = True
    paused = False

    # spawn DearPyGui controller process (protected inside main)
    _mgr = Manager()
    _shared = _mgr.dict(default_controls(simulator.max_particles))
    _shared['toggle_pause'] = False
    _shared['reset_world'] = False
    _shared['spawn_emitter'] = False
    _shared['__exit__'] = False
    _gui_proc = Process(target=gui_ctrl.run_gui, args=(_shared,), daemon=True)
    _gui_proc.start()

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 3:
                mx, my = event.pos
                simulator.add_emitter(Emitter(Vec2(mx, my), Vec2(0.0, -0.25), particles_per_second=20,
                                              particle_max_radius=40, randomise_initial_velocity=True, rng=rng))
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_r:
                    simulator = create_simulator(rng)

        # --- Handle GUI updates ---
        if _shared.get('toggle_pause', False):
            paused = not paused
            _shared['toggle_pause'] = False
        if _shared.get('reset_world', False):
            simulator = create_simulator(rng)
            _shared['reset_world'] = False
        if _shared.get('spawn_emitter', False):
            simulator.add_emitter(Emitter(Vec2(WIDTH // 2, HEIGHT - 50), Vec2(0.0, -0.3), particles_per_second=25,
                                          particle_max_radius=20, randomise_initial_velocity=True, rng=rng))
            _shared['spawn_emitter'] = False
        if _shared.get('__exit__', False):
            running = False
        apply_controls(simulator, _shared)

        # --- Update ---
        # clock.tick returns the milliseconds since the previous frame
        elapsed_ms = clock.tick(FPS)
        if not paused:
            simulator.tick(elapsed_ms)
        _shared['particle_count'] = len(simulator)
        _shared['emitter_count'] = len(simulator.emitters)

        # --- Draw ---
        screen.fill(BLACK)
        draw_particles(screen, simulator.snapshot())
        draw_emitters(screen, simulator.emitters)

        if paused:
            pause_text = font.render("PAUSED", True, WHITE)
            screen.blit(pause_text, (WIDTH - pause_text.get_width() - 10, 10))

        count_surf = font.render(f"Particles: {len(simulator)}", True, WHITE)
        screen.blit(count_surf, (10, HEIGHT - 30))

        pygame.display.flip()

    # cleanup: signal GUI to exit and join
    _shared['__exit__'] = True
    _gui_proc.join(timeout=1.0)
    logger.info("Simulation stopped with %d live particles", len(simulator))

    pygame.quit()


if __name__ == "__main__":
    main()
