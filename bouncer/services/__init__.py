"""Bounce pipeline stages: filtering, enrichment, matching, staleness, actions."""
