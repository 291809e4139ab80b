"""Skillshot Dodge - survive an escalating stream of projectiles"""

from .config import CLASSIC, THEMED, GameConfig, get_config
from .models import GameState, InputSnapshot, RenderFrame
from .simulation import Simulation

__all__ = ['CLASSIC', 'THEMED', 'GameConfig', 'get_config', 'GameState', 'InputSnapshot', 'RenderFrame', 'Simulation']
