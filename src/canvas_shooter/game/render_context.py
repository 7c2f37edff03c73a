"""Rendering configuration and theming."""

from dataclasses import dataclass

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class RenderContext:
    """Colors and sizes used by the renderer."""

    background_color: RGB
    star_color: RGB
    ship_color: RGB
    ship_cockpit_color: RGB
    bullet_color: RGB
    enemy_bullet_color: RGB
    enemy_top_color: RGB
    enemy_bottom_color: RGB
    tough_enemy_outline: RGB
    text_color: RGB
    overlay_color: tuple[int, int, int, int]

    @staticmethod
    def darkmode() -> "RenderContext":
        return RenderContext(
            background_color=(5, 10, 26),
            star_color=(118, 169, 255),
            ship_color=(79, 245, 255),
            ship_cockpit_color=(12, 47, 84),
            bullet_color=(140, 249, 255),
            enemy_bullet_color=(255, 150, 113),
            enemy_top_color=(255, 107, 107),
            enemy_bottom_color=(255, 158, 124),
            tough_enemy_outline=(255, 214, 107),
            text_color=(255, 255, 255),
            overlay_color=(0, 0, 0, 170),
        )
