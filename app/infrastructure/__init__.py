# Infrastructure layer - database access
"""
Infrastructure layer contains:
- Database repositories

This layer depends on the domain layer, not vice versa.
"""
