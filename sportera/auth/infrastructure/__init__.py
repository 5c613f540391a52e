"""Auth Infrastructure Layer.

포트의 구현체(어댑터)를 제공합니다.
"""
