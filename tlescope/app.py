"""The application window and its main loop."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

import pygame

from .camera import CameraController, InputState
from .renderer import Renderer
from .scene import BillboardHelper, Scene
from .vecmath import Vector2

__all__ = ["TLEscope", "main"]

logger = logging.getLogger(__name__)

TITLE = "TLEscope"
LOADING_TITLE = "Loading..."
TARGET_FPS = 60

ICON_IMAGE = "icon/tlescopeico_512.png"
EARTH_IMAGE = "daymap8k.png"
CLOUD_IMAGE = "cloudlayer.png"
LOCATION_IMAGE = "fonts/satellite_alt_40dp_FFFFFF_FILL0_wght300_GRAD0_opsz40.png"
FONT_FILE = "fonts/RobotoFont.ttf"


class TLEscope:
    """Owns the window, the scene, the camera and the renderer."""

    def __init__(
        self,
        resource_dir: str | os.PathLike[str] = "resources",
        width: int = 1280,
        height: int = 720,
    ) -> None:
        self.resource_dir = Path(resource_dir)
        self.screen_width = width
        self.screen_height = height
        self.screen: pygame.Surface | None = None
        self.scene: Scene | None = None
        self.camera: CameraController | None = None
        self.renderer: Renderer | None = None
        self.billboard_helper: BillboardHelper | None = None

    def __enter__(self) -> TLEscope:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def init(self) -> bool:
        """Open the window and build the scene; returns True when ready."""
        pygame.init()
        self.screen = pygame.display.set_mode(
            (self.screen_width, self.screen_height), pygame.RESIZABLE
        )
        pygame.display.set_caption(LOADING_TITLE)
        icon = self._load_image(ICON_IMAGE)
        if icon is not None:
            pygame.display.set_icon(icon)

        font_path = self.resource_dir / FONT_FILE
        self.scene = Scene()
        self.camera = CameraController()
        self.renderer = Renderer(
            self.scene,
            self.camera,
            self.screen_width,
            self.screen_height,
            font_path if font_path.is_file() else None,
        )
        self.billboard_helper = BillboardHelper(self.scene)

        earth = self._load_image(EARTH_IMAGE)
        if earth is not None:
            earth = pygame.transform.flip(earth, True, False)
        self.scene.gen_earth(earth, self._load_image(CLOUD_IMAGE))
        self.renderer.set_scene_specific(
            self.billboard_helper, self._load_image(LOCATION_IMAGE)
        )

        pygame.display.set_caption(TITLE)
        return True

    def run(self) -> int:
        """Run the main loop until the window is closed; returns frames drawn."""
        if self.screen is None or self.renderer is None or self.camera is None:
            raise RuntimeError("init() must be called before run()")
        clock = pygame.time.Clock()
        frames = 0
        while True:
            wheel = 0.0
            quitting = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    quitting = True
                elif event.type == pygame.VIDEORESIZE:
                    self.screen = pygame.display.get_surface() or self.screen
                    self.renderer.resize(event.w, event.h)
                elif event.type == pygame.MOUSEWHEEL:
                    wheel += event.y
            if quitting:
                return frames

            frame_time = clock.tick(TARGET_FPS) / 1000.0
            buttons = pygame.mouse.get_pressed()
            inputs = InputState(
                right_button_down=bool(buttons[2]),
                middle_button_down=bool(buttons[1]),
                mouse_delta=Vector2(*pygame.mouse.get_rel()),
                wheel=wheel,
            )
            self.camera.update(inputs)
            self.renderer.render(self.screen, frame_time, clock.get_fps())
            pygame.display.flip()
            frames += 1

    def close(self) -> None:
        """Release the scene and shut the window."""
        self.screen = None
        self.scene = None
        self.camera = None
        self.renderer = None
        self.billboard_helper = None
        pygame.quit()

    def _load_image(self, relative: str) -> pygame.Surface | None:
        path = self.resource_dir / relative
        if not path.is_file():
            logger.warning("Image not found: %s", path)
            return None
        return pygame.image.load(os.fspath(path))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tlescope", description="Satellite viewer.")
    parser.add_argument(
        "--resources",
        default="resources",
        help="directory holding textures, fonts and icons",
    )
    args = parser.parse_args(argv)
    with TLEscope(args.resources) as app:
        if app.init():
            app.run()
    return 0