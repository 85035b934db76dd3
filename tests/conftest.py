# tests/conftest.py
from __future__ import annotations
import os
import sys
from pathlib import Path
import pytest

# Ensure src/ is importable so `import eventemitter` works without an install
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Headless pygame setup (only the bridge tests touch pygame)
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def pygame_display():
    import pygame
    pygame.display.init()
    # the event queue needs a video subsystem; a tiny hidden surface is enough
    pygame.display.set_mode((1, 1))
    pygame.event.clear()
    try:
        yield pygame
    finally:
        pygame.display.quit()
        pygame.quit()
