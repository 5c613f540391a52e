"""Auth Bounded Context.

계정 등록, 비밀번호 로그인, 세션 토큰 발급/검증을 담당합니다.
"""
