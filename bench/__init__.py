"""Benchmark tooling for the gridpath search engine."""
