# -*- coding: utf-8 -*-
"""
번역기에서 사용될 커스텀 예외 클래스를 정의합니다.
"""

from typing import Optional


class TranslatorError(Exception):
    """번역기의 기본이 되는 예외 클래스입니다."""
    pass


class DictionaryLoadError(TranslatorError):
    """언어 사전 파일을 찾지 못했거나 읽을 수 없을 때 발생하는 예외입니다."""

    def __init__(self, language_code: str, reason: str, path: Optional[str] = None):
        self.language_code = language_code
        self.reason = reason
        self.path = path

        message = f"언어 사전 로드 실패 ({language_code}): {reason}"
        if path:
            message += f" [{path}]"
        super().__init__(message)
