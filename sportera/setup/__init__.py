"""Application Setup.

설정, 로깅, 메트릭, 의존성 컨테이너를 담당합니다.
"""
