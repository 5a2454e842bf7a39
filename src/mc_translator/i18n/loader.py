# -*- coding: utf-8 -*-
"""
언어 사전 로더

lang/<언어 코드>.json 형식의 평면 JSON 사전을 읽어 문자열 매핑으로 반환합니다.
"""

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from ..utils.exceptions import DictionaryLoadError

logger = logging.getLogger(__name__)

# 패키지에 포함된 기본 사전 위치
BUNDLED_PACKAGE = "mc_translator"
BUNDLED_DIR = "lang"


class DictionaryLoader:
    """언어 사전 로더 기본 클래스"""

    def load(self, language_code: str) -> Mapping[str, str]:
        """
        언어 사전 로드

        Args:
            language_code: 언어 코드 (예: ja_jp)

        Returns:
            Mapping[str, str]: 사전 키 -> 번역 문자열

        Raises:
            DictionaryLoadError: 사전이 없거나 읽을 수 없는 경우
        """
        raise NotImplementedError


def parse_dictionary(language_code: str, text: str, path: Optional[str] = None) -> Dict[str, str]:
    """JSON 텍스트를 평면 사전으로 변환"""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DictionaryLoadError(language_code, f"JSON 파싱 실패: {e}", path) from e

    if not isinstance(data, dict):
        raise DictionaryLoadError(
            language_code, f"최상위 값이 객체가 아님: {type(data).__name__}", path
        )

    translations = {key: value for key, value in data.items() if isinstance(value, str)}

    skipped = len(data) - len(translations)
    if skipped:
        logger.debug(f"문자열이 아닌 값 {skipped}개 건너뜀 ({language_code})")

    return translations


class LangFileLoader(DictionaryLoader):
    """lang 디렉토리(또는 패키지 리소스)에서 사전을 읽는 로더"""

    def __init__(self, lang_dir: Optional[Union[str, Path]] = None):
        """
        LangFileLoader 초기화

        Args:
            lang_dir: 사전 디렉토리 경로 (None이면 패키지 기본 사전 사용)
        """
        self.lang_dir = Path(lang_dir) if lang_dir is not None else None

        source = self.lang_dir if self.lang_dir is not None else f"{BUNDLED_PACKAGE}/{BUNDLED_DIR}"
        logger.debug(f"LangFileLoader 초기화: {source}")

    def _resource(self, language_code: str):
        filename = f"{language_code}.json"
        if self.lang_dir is not None:
            return self.lang_dir / filename
        return resources.files(BUNDLED_PACKAGE).joinpath(BUNDLED_DIR).joinpath(filename)

    def load(self, language_code: str) -> Dict[str, str]:
        resource = self._resource(language_code)
        path = str(resource)

        try:
            if not resource.is_file():
                raise DictionaryLoadError(language_code, "사전 파일을 찾을 수 없음", path)

            text = resource.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryLoadError(language_code, f"사전 파일 읽기 실패: {e}", path) from e

        translations = parse_dictionary(language_code, text, path)
        logger.info(f"언어 사전 로드: {path} ({len(translations)}개)")
        return translations

    def available_languages(self):
        """사용 가능한 언어 코드 목록"""
        if self.lang_dir is not None:
            if not self.lang_dir.is_dir():
                return []
            entries = self.lang_dir.iterdir()
        else:
            entries = resources.files(BUNDLED_PACKAGE).joinpath(BUNDLED_DIR).iterdir()

        return sorted(entry.name[:-5] for entry in entries if entry.name.endswith('.json'))


class MappingLoader(DictionaryLoader):
    """메모리상의 사전을 제공하는 로더 (호스트 주입 및 테스트용)"""

    def __init__(self, dictionaries: Mapping[str, Mapping[str, str]]):
        self._dictionaries = dict(dictionaries)
        self.load_count: Dict[str, int] = {}

    def load(self, language_code: str) -> Dict[str, str]:
        self.load_count[language_code] = self.load_count.get(language_code, 0) + 1

        if language_code not in self._dictionaries:
            raise DictionaryLoadError(language_code, "등록되지 않은 언어")

        return dict(self._dictionaries[language_code])
