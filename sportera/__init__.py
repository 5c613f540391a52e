"""SportEra Backend.

스포츠 시설 위치 기반 디렉터리 서비스입니다.

Bounded Contexts:
    - location/: 장소 카탈로그 및 주변 검색
    - auth/: 계정 등록, 로그인, 세션 토큰
    - setup/: 설정, 로깅, 메트릭, 의존성 조립
"""
