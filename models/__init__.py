"""Modele danych: zawodnicy, role, drużyny i rekordy meczu."""
from models.roles import PLAYER_ROLES, PlayerRole, RoleCategory
from models.player import MoraleBoost, Player, PlayerAttributes
from models.match import MatchCommentary, MatchEvent, MatchResult

__all__ = [
    'PLAYER_ROLES', 'PlayerRole', 'RoleCategory',
    'MoraleBoost', 'Player', 'PlayerAttributes',
    'MatchCommentary', 'MatchEvent', 'MatchResult',
]
