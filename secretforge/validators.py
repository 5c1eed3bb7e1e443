"""Validation utilities for SecretForge trackers."""

from __future__ import annotations

from .app import SecretTracker


def validate_tracker(tracker: SecretTracker) -> list[str]:
    """Return list of validation errors discovered in configured tracker."""
    errors: list[str] = []

    secrets = [card for card in tracker.catalog.iter_cards() if card.is_secret]
    if not secrets:
        errors.append("No secret cards registered in catalog.")
    for card in secrets:
        if not card.player_class:
            errors.append(f"Secret '{card.card_id}' has no class and can never be a candidate.")
        if not card.card_set:
            errors.append(f"Secret '{card.card_id}' has no set and is hidden in draft modes.")

    for name, provider in (("arena", tracker.arena), ("duels", tracker.duels)):
        ruleset = provider.current()
        for card_id in sorted(ruleset.banned_secrets | ruleset.exclusive_secrets):
            if card_id not in tracker.catalog:
                errors.append(f"Ruleset '{name}' references unknown card '{card_id}'.")

    rules = tracker.config.rules
    if rules.starting_entity_limit <= 0:
        errors.append("Rule 'starting_entity_limit' must be positive.")

    return errors


__all__ = ["validate_tracker"]
