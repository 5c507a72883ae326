import pygame

import constants


def draw_particles(screen, snapshot):
    """Draw every particle of a Simulator.snapshot() in its aged colour."""
    for p in snapshot:
        # alpha is already folded into the faded rgb against a black background
        pygame.draw.circle(screen, p.colour.to_tuple(), (int(p.pos.x), int(p.pos.y)), max(1, int(round(p.radius))))


def draw_emitters(screen, emitters, color=constants.EMITTER_COLOR):
    for e in emitters:
        pygame.draw.circle(screen, color, (int(e.pos.x), int(e.pos.y)), constants.EMITTER_SIZE // 4)
        direction = e.direction.copy()
        length = direction.length()
        if length > 0.0:
            direction.scale(constants.EMITTER_SIZE / length)
        end_pos = e.pos + direction
        pygame.draw.line(screen, color, (int(e.pos.x), int(e.pos.y)), (int(end_pos.x), int(end_pos.y)), 2)
