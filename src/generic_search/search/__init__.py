"""
Search and filter engines.

- engine: substring search along search paths, dedup and ranking
- filter: exact-match filtering by a previously found result
- dedup: identity and value dedup policies
- protocols: interfaces for engines, filters and bound services
"""
