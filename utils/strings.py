"""strings: 문자열 처리 유틸리티 모듈."""


def capitalize_name(name: str) -> str:
    """이름의 각 단어 첫 글자를 대문자로, 나머지를 소문자로 변환합니다.

    연속된 공백은 하나로 합쳐지고 앞뒤 공백은 제거됩니다.

    Args:
        name: 입력 이름 (예: "jOHN doe").

    Returns:
        변환된 이름 (예: "John Doe").
    """
    return " ".join(word[0].upper() + word[1:].lower() for word in name.split())
