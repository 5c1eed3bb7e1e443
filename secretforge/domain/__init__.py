"""Domain models and services."""

from .candidates import CandidateCard, build_candidate_list
from .cards import CardCatalog, CardMetadata
from .entities import Format, GameState, GameType, MatchState, ObservedEntity
from .events import SECRET_ADDED, SECRETS_CHANGED, EventBus, SecretAdded, SecretsChanged
from .exceptions import ReentrantUpdate, SecretForgeError
from .fast_combat import DeferredExclusionReconciler, FastCombatReconciler, NoFastCombat
from .manager import SecretsManager
from .rules import DeckRules, LimitedModeRuleset, RulesetProvider, StaticRulesetProvider
from .secret import Secret

__all__ = [
    "CandidateCard",
    "build_candidate_list",
    "CardCatalog",
    "CardMetadata",
    "Format",
    "GameState",
    "GameType",
    "MatchState",
    "ObservedEntity",
    "SECRET_ADDED",
    "SECRETS_CHANGED",
    "EventBus",
    "SecretAdded",
    "SecretsChanged",
    "ReentrantUpdate",
    "SecretForgeError",
    "DeferredExclusionReconciler",
    "FastCombatReconciler",
    "NoFastCombat",
    "SecretsManager",
    "DeckRules",
    "LimitedModeRuleset",
    "RulesetProvider",
    "StaticRulesetProvider",
    "Secret",
]
