"""HUD, hazard sprites, ability icons and full-screen text panels"""

from __future__ import annotations

import pygame

from .constants import (
    BG_COLOR, TEXT_COLOR, FONT_NAME, FONT_SIZE_MEDIUM,
    ABILITY_ICON_SIZE, ABILITY_ICON_SPACING,
)
from .models import (
    AbilityView, AreaPhase, AvatarView, GameState, HazardKind, HazardShape, HazardView,
    RenderFrame, TextCommand,
)


class FontCache:
    """Creates each font size once; pygame font construction is slow."""

    def __init__(self, name: str | None = FONT_NAME) -> None:
        self.name = name
        self.fonts: dict[int, pygame.font.Font] = {}

    def get(self, size: int) -> pygame.font.Font:
        if size not in self.fonts:
            self.fonts[size] = pygame.font.Font(self.name, size)
        return self.fonts[size]


def blit_text(surf: pygame.Surface, fonts: FontCache, cmd: TextCommand) -> None:
    """Render a text command; y is the vertical middle of the line."""
    text_surf = fonts.get(cmd.size).render(cmd.text, True, cmd.color)
    if cmd.align == "left":
        rect = text_surf.get_rect(midleft=(int(cmd.x), int(cmd.y)))
    elif cmd.align == "right":
        rect = text_surf.get_rect(midright=(int(cmd.x), int(cmd.y)))
    else:
        rect = text_surf.get_rect(center=(int(cmd.x), int(cmd.y)))
    surf.blit(text_surf, rect)


class HUD:
    """Score labels at the top left, ability cooldown icons at the bottom."""

    def __init__(self, fonts: FontCache) -> None:
        self.fonts = fonts

    def draw(self, surf: pygame.Surface, texts: list[TextCommand], abilities: list[AbilityView]) -> None:
        for cmd in texts:
            blit_text(surf, self.fonts, cmd)

        width, height = surf.get_size()
        y = height - 40
        count = len(abilities)
        for i, ability in enumerate(abilities):
            # Icons sit symmetrically around the horizontal center
            x = width // 2 + int((i - (count - 1) / 2) * 2 * ABILITY_ICON_SPACING)
            self.draw_ability_icon(surf, x, y, ability)

    def draw_ability_icon(self, surf: pygame.Surface, x: int, y: int, ability: AbilityView) -> None:
        size = ABILITY_ICON_SIZE
        rect = pygame.Rect(x - size // 2, y - size // 2, size, size)

        pygame.draw.rect(surf, (34, 34, 34) if ability.ready else (85, 85, 85), rect)
        pygame.draw.rect(surf, (136, 136, 136) if ability.ready else (170, 170, 170), rect, 2)

        key_color = (255, 255, 255) if ability.ready else (136, 136, 136)
        key_text = self.fonts.get(24).render(ability.key, True, key_color)
        surf.blit(key_text, key_text.get_rect(center=rect.center))

        # Cooldown overlay
        if not ability.ready:
            overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
            overlay.fill((0, 0, 0, 153))
            surf.blit(overlay, rect)
            remaining = self.fonts.get(28).render(f"{ability.remaining:.1f}", True, TEXT_COLOR)
            surf.blit(remaining, remaining.get_rect(center=rect.center))


class ArenaPainter:
    """Draws the avatar and hazards from their views."""

    def draw_avatar(self, surf: pygame.Surface, avatar: AvatarView) -> None:
        rect = pygame.Rect(int(avatar.x), int(avatar.y), int(avatar.width), int(avatar.height))
        pygame.draw.rect(surf, avatar.color, rect)
        if avatar.dashing:
            pygame.draw.rect(surf, TEXT_COLOR, rect, 2)

    def draw_hazard(self, surf: pygame.Surface, hazard: HazardView) -> None:
        if hazard.kind is HazardKind.AREA_EFFECT:
            self.draw_area_effect(surf, hazard)
        elif hazard.shape is HazardShape.BOLT:
            self.draw_bolt(surf, hazard)
        else:
            pygame.draw.circle(surf, hazard.color, (int(hazard.x), int(hazard.y)), int(hazard.radius))

    def draw_area_effect(self, surf: pygame.Surface, hazard: HazardView) -> None:
        r = int(hazard.radius)
        zone = pygame.Surface((r * 2 + 4, r * 2 + 4), pygame.SRCALPHA)
        color = (*hazard.color, int(255 * hazard.alpha))
        if hazard.phase is AreaPhase.WARNING:
            pygame.draw.circle(zone, color, (r + 2, r + 2), r, 4)
        else:
            pygame.draw.circle(zone, color, (r + 2, r + 2), r)
        surf.blit(zone, zone.get_rect(center=(int(hazard.x), int(hazard.y))))

    def draw_bolt(self, surf: pygame.Surface, hazard: HazardView) -> None:
        length = max(int(hazard.length), int(hazard.radius * 2))
        bolt = pygame.Surface((length, int(hazard.radius * 2)), pygame.SRCALPHA)
        bolt.fill((*hazard.color, 255))
        # pygame rotates counter-clockwise; screen y grows downward
        rotated = pygame.transform.rotate(bolt, -hazard.orientation)
        surf.blit(rotated, rotated.get_rect(center=(int(hazard.x), int(hazard.y))))


class GameOverScreen:
    """Game over screen with final score, high score and restart prompt."""

    def __init__(self, fonts: FontCache) -> None:
        self.fonts = fonts

    def draw(self, surf: pygame.Surface, texts: list[TextCommand]) -> None:
        overlay = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        surf.blit(overlay, (0, 0))
        for cmd in texts:
            blit_text(surf, self.fonts, cmd)


class Renderer:
    """Paints a RenderFrame onto a surface; owns no game state."""

    def __init__(self, font_name: str | None = FONT_NAME) -> None:
        self.fonts = FontCache(font_name)
        self.hud = HUD(self.fonts)
        self.arena = ArenaPainter()
        self.game_over_screen = GameOverScreen(self.fonts)

    def draw(self, surf: pygame.Surface, frame: RenderFrame) -> None:
        """
        Compose the frame: bg -> hazards -> avatar -> HUD, or a text panel.
        """
        surf.fill(BG_COLOR)

        if frame.state is GameState.PLAYING:
            for hazard in frame.hazards:
                self.arena.draw_hazard(surf, hazard)
            if frame.avatar is not None:
                self.arena.draw_avatar(surf, frame.avatar)
            self.hud.draw(surf, frame.texts, frame.abilities)
        elif frame.state is GameState.GAME_OVER:
            self.game_over_screen.draw(surf, frame.texts)
        else:
            for cmd in frame.texts:
                blit_text(surf, self.fonts, cmd)

    def draw_fps(self, surf: pygame.Surface, fps: float) -> None:
        fps_color = (0, 255, 0) if fps >= 55 else (255, 255, 0) if fps >= 30 else (255, 0, 0)
        cmd = TextCommand(f"FPS: {fps:.1f}", surf.get_width() - 20, 30, FONT_SIZE_MEDIUM - 10, fps_color, align="right")
        blit_text(surf, self.fonts, cmd)
