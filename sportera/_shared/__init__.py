"""Shared Kernel.

여러 bounded context에서 공통으로 사용하는 예외 분류와 DB 기반 코드입니다.
"""
