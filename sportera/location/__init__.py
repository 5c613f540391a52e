"""Location Bounded Context.

스포츠 시설(Place) 카탈로그와 위치 기반 주변 검색을 담당합니다.
"""
