"""
Interface Layer

외부 입력(설정 파일)을 검증하고 런타임 구성으로 변환합니다.
"""
