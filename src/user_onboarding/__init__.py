"""Onboarding wizard and profile screen backed by local app storage."""
