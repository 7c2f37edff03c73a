"""Renderer for drawing game frames using Pillow."""

from PIL import Image, ImageColor, ImageDraw, ImageFont

from .render_context import RGB, RenderContext
from .snapshot import BoxFrameState, EnemyFrameState, FrameSnapshot

WATERMARK_TEXT = "canvas-shooter"


def blend_color(start: RGB, end: RGB, t: float) -> RGB:
    """Linear interpolation between two colors, t in [0, 1]."""
    r1, g1, b1 = start
    r2, g2, b2 = end
    return (round(r1 + (r2 - r1) * t), round(g1 + (g2 - g1) * t), round(b1 + (b2 - b1) * t))


class Renderer:
    """Renders frame snapshots as PIL Images. Never touches the game state."""

    def __init__(self, render_context: RenderContext, watermark: bool = False):
        """
        Initialize renderer.

        Args:
            render_context: Rendering configuration and theming
            watermark: Whether to add watermark to frames
        """
        self.context = render_context
        self.watermark = watermark
        self.font = ImageFont.load_default()

    def render_frame(self, snapshot: FrameSnapshot) -> Image.Image:
        """
        Render a snapshot as an image.

        Returns:
            PIL Image of the frame
        """
        size = (snapshot.width, snapshot.height)
        img = Image.new("RGB", size, self.context.background_color)
        overlay = Image.new("RGBA", size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(overlay, "RGBA")

        self._draw_stars(draw, snapshot)
        for bullet in snapshot.bullets:
            self._draw_box(draw, bullet, self.context.bullet_color)
        for bullet in snapshot.enemy_bullets:
            self._draw_box(draw, bullet, self.context.enemy_bullet_color)
        for enemy in snapshot.enemies:
            self._draw_enemy(draw, enemy)
        self._draw_player(draw, snapshot.player)
        self._draw_particles(draw, snapshot)
        self._draw_hud(draw, snapshot)

        if snapshot.game_over:
            self._draw_game_over(draw, snapshot)
        if self.watermark:
            self._draw_watermark(draw, snapshot)

        combined = Image.alpha_composite(img.convert("RGBA"), overlay)
        return combined.convert("RGB").convert("P", palette=Image.Palette.ADAPTIVE)

    def _draw_stars(self, draw: ImageDraw.ImageDraw, snapshot: FrameSnapshot) -> None:
        for star in snapshot.stars:
            alpha = int(255 * min(1.0, 0.6 + star.radius * 0.4))
            r = star.radius
            draw.ellipse(
                [star.x - r, star.y - r, star.x + r, star.y + r],
                fill=(*self.context.star_color, alpha),
            )

    def _draw_box(self, draw: ImageDraw.ImageDraw, box: BoxFrameState, color: tuple[int, int, int]) -> None:
        draw.rectangle([box.x, box.y, box.x + box.width, box.y + box.height], fill=color)

    def _draw_enemy(self, draw: ImageDraw.ImageDraw, enemy: EnemyFrameState) -> None:
        """Draw a downward-pointing hull shaded top to bottom, with a dark core."""
        cx = enemy.x + enemy.width / 2
        top = enemy.y
        bottom = enemy.y + enemy.height
        rows = max(1, int(enemy.height))
        for row in range(rows + 1):
            t = row / rows
            half_width = enemy.width / 2 * t
            draw.line(
                [(cx - half_width, top + row), (cx + half_width, top + row)],
                fill=blend_color(self.context.enemy_top_color, self.context.enemy_bottom_color, t),
            )
        if enemy.health > 1:
            draw.polygon(
                [(cx, top), (enemy.x + enemy.width, bottom), (enemy.x, bottom)],
                outline=self.context.tough_enemy_outline,
            )
        draw.rectangle(
            [
                cx - enemy.width / 4,
                top + enemy.height / 4,
                cx + enemy.width / 4,
                top + enemy.height / 4 + enemy.height / 1.6,
            ],
            fill=(0, 0, 0, 77),
        )

    def _draw_player(self, draw: ImageDraw.ImageDraw, player: BoxFrameState) -> None:
        cx = player.x + player.width / 2
        cy = player.y + player.height / 2
        half_w = player.width / 2
        half_h = player.height / 2
        draw.polygon(
            [
                (cx, cy - half_h),
                (cx + half_w, cy + half_h),
                (cx, cy + half_h / 2),
                (cx - half_w, cy + half_h),
            ],
            fill=self.context.ship_color,
        )
        draw.rectangle(
            [cx - 6, cy - player.height / 6, cx + 6, cy - player.height / 6 + player.height / 2],
            fill=self.context.ship_cockpit_color,
        )

    def _draw_particles(self, draw: ImageDraw.ImageDraw, snapshot: FrameSnapshot) -> None:
        for particle in snapshot.particles:
            alpha = int(255 * max(0.0, min(1.0, particle.life * 2)))
            r = max(0.0, particle.radius)
            draw.ellipse(
                [particle.x - r, particle.y - r, particle.x + r, particle.y + r],
                fill=(*ImageColor.getrgb(particle.color)[:3], alpha),
            )

    def _draw_hud(self, draw: ImageDraw.ImageDraw, snapshot: FrameSnapshot) -> None:
        """Draw score in the top-left corner and lives in the top-right."""
        margin = 5
        draw.text((margin, margin), f"Score: {snapshot.score}", font=self.font, fill=self.context.text_color)
        lives_text = f"Lives: {snapshot.lives}"
        bbox = draw.textbbox((0, 0), lives_text, font=self.font)
        draw.text(
            (snapshot.width - (bbox[2] - bbox[0]) - margin, margin),
            lives_text,
            font=self.font,
            fill=self.context.text_color,
        )

    def _draw_game_over(self, draw: ImageDraw.ImageDraw, snapshot: FrameSnapshot) -> None:
        draw.rectangle([0, 0, snapshot.width, snapshot.height], fill=self.context.overlay_color)
        lines = [snapshot.overlay_title, snapshot.overlay_message]
        y = snapshot.height / 2 - 12
        for line in lines:
            bbox = draw.textbbox((0, 0), line, font=self.font)
            x = (snapshot.width - (bbox[2] - bbox[0])) / 2
            draw.text((x, y), line, font=self.font, fill=self.context.text_color)
            y += (bbox[3] - bbox[1]) + 8

    def _draw_watermark(self, draw: ImageDraw.ImageDraw, snapshot: FrameSnapshot) -> None:
        """Draw watermark text in the bottom-right corner."""
        color = (100, 100, 100, 128)  # Semi-transparent gray
        margin = 5
        bbox = draw.textbbox((0, 0), WATERMARK_TEXT, font=self.font)
        x = snapshot.width - (bbox[2] - bbox[0]) - margin
        y = snapshot.height - (bbox[3] - bbox[1]) - margin
        draw.text((x, y), WATERMARK_TEXT, font=self.font, fill=color)
