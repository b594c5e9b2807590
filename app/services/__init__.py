"""서비스 패키지 — 검색 비즈니스 로직 계층.

Service package — Search business logic layer.
Services call repositories for queries and shape results into API schemas.
"""
