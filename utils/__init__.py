"""utils: 유틸리티 함수들을 모아놓은 패키지.

Modules:
    ids: 거래 ID, 6자리 코드, UUID v4, 랜덤 문자열 생성
    password: 비밀번호 해싱 및 검증
    formatters: 날짜/시간 포맷팅
    phone: 전화번호 정규화
    strings: 이름 대소문자 변환
    http_client: JSON HTTP 요청
    exceptions: 공통 예외
"""
