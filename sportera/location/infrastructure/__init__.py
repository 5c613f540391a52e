"""Location Infrastructure Layer.

PlaceStore 포트의 구현체들입니다.

Components:
    - persistence_memory/: 프로세스 메모리 저장소 (데모 데이터 포함)
    - persistence_postgres/: SQLAlchemy 기반 저장소
"""
