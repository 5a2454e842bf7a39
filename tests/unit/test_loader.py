"""
언어 사전 로더 단위 테스트
"""

import json

import pytest

from mc_translator.i18n import LangFileLoader, MappingLoader
from mc_translator.utils import DictionaryLoadError


def write_lang_file(lang_dir, language_code, content):
    path = lang_dir / f"{language_code}.json"
    if isinstance(content, str):
        path.write_text(content, encoding='utf-8')
    else:
        path.write_text(json.dumps(content, ensure_ascii=False), encoding='utf-8')
    return path


class TestLangFileLoader:
    """LangFileLoader 테스트"""

    def test_load_from_directory(self, tmp_path):
        """디렉토리에서 사전 로드"""
        write_lang_file(tmp_path, 'ja_jp', {'block.minecraft.stone': '石'})

        loader = LangFileLoader(tmp_path)
        translations = loader.load('ja_jp')

        assert translations == {'block.minecraft.stone': '石'}

    def test_missing_file(self, tmp_path):
        """사전 파일이 없으면 DictionaryLoadError"""
        loader = LangFileLoader(tmp_path)

        with pytest.raises(DictionaryLoadError) as exc_info:
            loader.load('xx_xx')

        assert exc_info.value.language_code == 'xx_xx'
        assert exc_info.value.path.endswith('xx_xx.json')

    def test_invalid_json(self, tmp_path):
        """JSON 파싱 실패"""
        write_lang_file(tmp_path, 'ja_jp', '{"block.minecraft.stone": ')

        with pytest.raises(DictionaryLoadError, match="JSON 파싱 실패"):
            LangFileLoader(tmp_path).load('ja_jp')

    def test_top_level_not_object(self, tmp_path):
        """최상위 값이 객체가 아니면 실패"""
        write_lang_file(tmp_path, 'ja_jp', ['block.minecraft.stone'])

        with pytest.raises(DictionaryLoadError, match="최상위 값이 객체가 아님"):
            LangFileLoader(tmp_path).load('ja_jp')

    def test_non_string_values_skipped(self, tmp_path):
        """문자열이 아닌 값은 제외"""
        write_lang_file(tmp_path, 'en_us', {
            'block.minecraft.stone': 'Stone',
            'block.minecraft.dirt': 3,
            'block.minecraft.sand': None,
        })

        translations = LangFileLoader(tmp_path).load('en_us')
        assert translations == {'block.minecraft.stone': 'Stone'}

    def test_file_name_too_long(self, tmp_path):
        """파일 이름이 너무 긴 언어 코드도 DictionaryLoadError"""
        language_code = 'x' * 300

        with pytest.raises(DictionaryLoadError) as exc_info:
            LangFileLoader(tmp_path).load(language_code)
        assert exc_info.value.language_code == language_code

        with pytest.raises(DictionaryLoadError):
            LangFileLoader().load(language_code)

    def test_language_code_is_case_sensitive(self, tmp_path):
        """언어 코드는 정규화하지 않음"""
        write_lang_file(tmp_path, 'ja_jp', {'block.minecraft.stone': '石'})

        loader = LangFileLoader(tmp_path)
        assert 'ja_jp' in loader.available_languages()

        if not (tmp_path / 'JA_JP.json').exists():
            with pytest.raises(DictionaryLoadError):
                loader.load('JA_JP')

    def test_available_languages(self, tmp_path):
        write_lang_file(tmp_path, 'ja_jp', {})
        write_lang_file(tmp_path, 'en_us', {})
        (tmp_path / 'notes.txt').write_text('ignored', encoding='utf-8')

        assert LangFileLoader(tmp_path).available_languages() == ['en_us', 'ja_jp']
        assert LangFileLoader(tmp_path / 'missing').available_languages() == []

    def test_bundled_dictionaries(self):
        """패키지 내장 사전 로드"""
        loader = LangFileLoader()

        assert 'ja_jp' in loader.available_languages()
        assert 'en_us' in loader.available_languages()

        translations = loader.load('ja_jp')
        assert translations['block.minecraft.stone'] == '石'
        assert translations['entity.minecraft.zombie'] == 'ゾンビ'


class TestMappingLoader:
    """MappingLoader 테스트"""

    def test_load_copy(self):
        source = {'ja_jp': {'block.minecraft.stone': '石'}}
        loader = MappingLoader(source)

        translations = loader.load('ja_jp')
        translations['block.minecraft.dirt'] = '土'

        assert 'block.minecraft.dirt' not in source['ja_jp']
        assert loader.load_count['ja_jp'] == 1

    def test_unknown_language(self):
        with pytest.raises(DictionaryLoadError, match="등록되지 않은 언어"):
            MappingLoader({}).load('fr_fr')
