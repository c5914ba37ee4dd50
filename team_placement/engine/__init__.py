"""Newcomer placement engine.

Sub-modules:
- typing_parser  – MBTI flags & temperament
- compatibility  – leader ↔ newcomer scoring and explanations
- selector       – greedy compatibility matching
- even_allocator – load-balancing fallback
- results        – AssignmentResult & mapping re-application
- assignment     – strategy dispatch
"""
