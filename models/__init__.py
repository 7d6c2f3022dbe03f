"""models: 데이터 클래스 패키지.

사용자 데이터 모델을 제공합니다.
"""

from .user_models import User

__all__ = [
    # 사용자 모델
    "User",
]
