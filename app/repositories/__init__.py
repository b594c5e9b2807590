"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Holds the generic BaseRepository plus the team repository and the member
search repository (dynamic predicates, simple and optimized paging).
"""
