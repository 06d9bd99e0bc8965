# renderer/preview.py
from typing import Tuple
import numpy as np
import pygame
from config import DISPLAY_SETTINGS

def window_size(width: int, height: int) -> Tuple[int, int]:
    """Largest size with the image's aspect ratio that fits the configured window limits."""
    scale = min(1.0,
                DISPLAY_SETTINGS['max_window_width'] / width,
                DISPLAY_SETTINGS['max_window_height'] / height)
    return max(1, int(width * scale)), max(1, int(height * scale))

def frame_to_surface(pixels: np.ndarray) -> pygame.Surface:
    """
    Convert a (height, width, 3) uint8 image to a pygame surface.
    pygame's surfarray is indexed (x, y), hence the transpose.
    """
    return pygame.surfarray.make_surface(np.ascontiguousarray(np.transpose(pixels, (1, 0, 2))))

def show(pixels: np.ndarray, caption: str = None) -> None:
    """
    Display the image in a window until it is closed or Escape is pressed.
    """
    pygame.init()
    try:
        height, width = pixels.shape[:2]
        size = window_size(width, height)
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(caption or DISPLAY_SETTINGS['caption'])

        surface = frame_to_surface(pixels)
        if size != (width, height):
            surface = pygame.transform.scale(surface, size)

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()
