"""Scoring components for the recommendation engine."""
from storm_draft.services.scorers.matchup_scorer import MatchupScorer
from storm_draft.services.scorers.meta_scorer import MetaScorer
from storm_draft.services.scorers.proficiency_scorer import ProficiencyScorer
from storm_draft.services.scorers.role_fit_scorer import RoleFitScorer

__all__ = [
    "MatchupScorer",
    "MetaScorer",
    "ProficiencyScorer",
    "RoleFitScorer",
]
