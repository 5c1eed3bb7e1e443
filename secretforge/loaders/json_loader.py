"""Load secret cards and draft-mode rulesets from JSON definitions."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence, TYPE_CHECKING

from ..domain.cards import CardMetadata
from ..domain.rules import LimitedModeRuleset

if TYPE_CHECKING:
    from ..app import SecretTracker

logger = logging.getLogger(__name__)

RULESET_KEYS = ("arena", "duels")


@dataclass(slots=True)
class CatalogDefinition:
    cards: Sequence[CardMetadata]
    rulesets: Mapping[str, LimitedModeRuleset] = field(default_factory=dict)


def load_catalog_from_json(tracker: "SecretTracker", path: str | Path) -> CatalogDefinition:
    """Load cards/rulesets from a JSON file and register them on the tracker."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    definition = parse_catalog_dict(data)
    tracker.catalog.register_cards(definition.cards)
    if "arena" in definition.rulesets:
        tracker.arena.update(definition.rulesets["arena"])
    if "duels" in definition.rulesets:
        tracker.duels.update(definition.rulesets["duels"])
    logger.info(
        "Loaded %d cards and %d rulesets from %s",
        len(definition.cards),
        len(definition.rulesets),
        path,
    )
    return definition


def parse_catalog_dict(data: dict[str, Any]) -> CatalogDefinition:
    """Parse a JSON dict (already decoded) into domain objects."""
    errors = validate_catalog_dict(data)
    if errors:
        raise ValueError(_format_errors("Catalog validation failed", errors))
    cards = tuple(parse_card(entry) for entry in data.get("cards", []))
    rulesets = {
        name: parse_ruleset(entry) for name, entry in (data.get("rulesets") or {}).items()
    }
    return CatalogDefinition(cards=cards, rulesets=rulesets)


def parse_card(entry: dict[str, Any]) -> CardMetadata:
    return CardMetadata(
        card_id=entry["id"],
        name=entry.get("name", entry["id"]),
        card_set=entry.get("set"),
        player_class=entry.get("class"),
        is_secret=bool(entry.get("secret", False)),
        max_copies=int(entry.get("maxCopies", 2)),
    )


def parse_ruleset(entry: dict[str, Any]) -> LimitedModeRuleset:
    return LimitedModeRuleset.of(
        current_sets=tuple(map(str, entry.get("currentSets", ()))),
        banned_secrets=tuple(map(str, entry.get("bannedSecrets", ()))),
        exclusive_secrets=tuple(map(str, entry.get("exclusiveSecrets", ()))),
    )


def validate_catalog_file(path: str | Path) -> list[str]:
    """Validate catalog JSON file and return a list of errors."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return validate_catalog_dict(data)


def validate_catalog_dict(data: dict[str, Any]) -> list[str]:
    errors: list[str] = []

    cards_raw = data.get("cards")
    if not isinstance(cards_raw, list) or not cards_raw:
        errors.append("Catalog must contain non-empty 'cards' array.")
    else:
        card_ids: set[str] = set()
        for idx, entry in enumerate(cards_raw, start=1):
            if not isinstance(entry, dict):
                errors.append(f"Card #{idx} must be an object.")
                continue
            card_id = entry.get("id")
            if not isinstance(card_id, str) or not card_id.strip():
                errors.append(f"Card #{idx} must define non-empty 'id'.")
                continue
            if card_id in card_ids:
                errors.append(f"Card id '{card_id}' defined multiple times.")
            card_ids.add(card_id)

            for field_name in ("name", "set", "class"):
                value = entry.get(field_name)
                if value is not None and (not isinstance(value, str) or not value.strip()):
                    errors.append(f"Card '{card_id}' has invalid '{field_name}' value '{value}'.")

            secret = entry.get("secret", False)
            if not isinstance(secret, bool):
                errors.append(f"Card '{card_id}' 'secret' must be a boolean.")
            elif secret and not entry.get("class"):
                errors.append(f"Secret '{card_id}' must define 'class'.")

            max_copies = entry.get("maxCopies")
            if max_copies is not None and (not isinstance(max_copies, int) or max_copies <= 0):
                errors.append(f"Card '{card_id}' has invalid 'maxCopies' value '{max_copies}'.")

    rulesets_raw = data.get("rulesets")
    if rulesets_raw is not None:
        if not isinstance(rulesets_raw, dict):
            errors.append("'rulesets' must be an object.")
        else:
            for name, entry in rulesets_raw.items():
                if name not in RULESET_KEYS:
                    errors.append(f"Unknown ruleset '{name}', expected one of {', '.join(RULESET_KEYS)}.")
                    continue
                if not isinstance(entry, dict):
                    errors.append(f"Ruleset '{name}' must be an object.")
                    continue
                for key in ("currentSets", "bannedSecrets", "exclusiveSecrets"):
                    value = entry.get(key, [])
                    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                        errors.append(f"Ruleset '{name}' '{key}' must be an array of strings.")

    return errors


def _format_errors(prefix: str, errors: Iterable[str]) -> str:
    formatted = "\n".join(f"- {err}" for err in errors)
    return f"{prefix}:\n{formatted}"
