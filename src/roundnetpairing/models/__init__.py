from roundnetpairing.models.group_config import (
    CustomGroupConfiguration,
    GroupConfiguration,
)
from roundnetpairing.models.pairing_result import (
    MatchSelection,
    PairingResult,
    TeamSelection,
)
from roundnetpairing.models.round_data import Match, RoundData, Team
from roundnetpairing.models.tournament_config import TournamentConfig

__all__ = [
    "CustomGroupConfiguration",
    "GroupConfiguration",
    "Match",
    "MatchSelection",
    "PairingResult",
    "RoundData",
    "Team",
    "TeamSelection",
    "TournamentConfig",
]
