"""
예제 실행 파일 단위 테스트
"""

import json

from mc_translator.main import main


class TestMain:
    """main() 테스트"""

    def test_translate_names(self, capsys):
        exit_code = main(['--lang', 'ja_jp', 'DIAMOND', 'ZOMBIE', 'NOT_A_REAL_MATERIAL'])
        output = capsys.readouterr().out

        assert exit_code == 0
        assert 'Current language: ja_jp' in output
        assert 'DIAMOND -> ダイヤモンド' in output
        assert 'ZOMBIE -> ゾンビ' in output
        assert 'NOT_A_REAL_MATERIAL -> NOT_A_REAL_MATERIAL' in output

    def test_examples_and_report(self, capsys):
        exit_code = main(['--lang', 'ja_jp', '--report'])
        output = capsys.readouterr().out

        assert exit_code == 0
        assert 'STONE -> 石' in output
        assert 'CREEPER -> クリーパー' in output
        assert 'Coverage:' in output

    def test_lang_dir_and_lookup_order(self, tmp_path, capsys):
        (tmp_path / 'ko_kr.json').write_text(
            json.dumps({'effect.minecraft.speed': '신속'}, ensure_ascii=False), encoding='utf-8'
        )

        main(['--lang', 'ko_kr', '--lang-dir', str(tmp_path), '--lookup-order', 'effect', 'SPEED'])
        output = capsys.readouterr().out

        assert 'SPEED -> 신속' in output

    def test_missing_language(self, tmp_path, capsys):
        exit_code = main(['--lang', 'xx_xx', '--lang-dir', str(tmp_path), 'STONE'])
        output = capsys.readouterr().out

        assert exit_code == 0
        assert 'STONE -> STONE' in output
