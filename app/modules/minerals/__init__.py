"""Mineral catalog: record store, per-language catalog cache, drafts and publishing."""
