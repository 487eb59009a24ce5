"""Service Layer — orchestrates pure validation around repository IO.

Invariants:
    - Services hold only repository references (constructor injection)
    - Validation always completes before the first write
"""
