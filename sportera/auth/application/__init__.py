"""Auth Application Layer.

Use Case(Interactor/QueryService)와 포트(Protocol)를 정의합니다.
"""
