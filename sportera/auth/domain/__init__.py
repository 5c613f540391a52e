"""Auth Domain Layer.

순수 비즈니스 로직을 담당하는 레이어입니다.
외부 프레임워크나 라이브러리에 의존하지 않습니다.

Components:
    - entities/: 도메인 엔티티 (Account)
    - value_objects/: 값 객체 (AccountId, Email, PasswordHash, TokenPayload)
    - enums/: 열거형 (AccountKind, TokenType)
    - ports/: 인터페이스 (AccountIdGenerator)
    - exceptions/: 도메인 예외
"""
