"""
McMaterialTranslator 예제 실행 파일
"""

import argparse
import logging
import sys
from typing import List, Optional

from .catalog import Category, EntityType, Material
from .config import Config
from .i18n import LangFileLoader, LanguageRegistry, generate_coverage_report

# 이름을 지정하지 않았을 때 출력할 예시
EXAMPLE_MATERIALS = [
    Material.STONE,
    Material.DIAMOND_SWORD,
    Material.IRON_PICKAXE,
    Material.GOLDEN_APPLE,
    Material.OAK_LOG,
    Material.COBBLESTONE,
    Material.GRASS_BLOCK,
    Material.WATER_BUCKET,
]
EXAMPLE_ENTITIES = [
    EntityType.ZOMBIE,
    EntityType.SKELETON,
    EntityType.CREEPER,
    EntityType.ENDERMAN,
    EntityType.VILLAGER,
]


class TranslatorFormatter(logging.Formatter):
    """{시분초.ms} {LEVEL} [{logger:line}] {message} 형식 포맷터"""

    def format(self, record):
        timestamp = self.formatTime(record, '%H:%M:%S')
        ms = int(record.created * 1000) % 1000
        time_with_ms = f"{timestamp}.{ms:03d}"

        location = f"[{record.name}:{record.lineno}]"
        message = f"{time_with_ms} {record.levelname} {location} {record.getMessage()}"

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


def setup_logging(log_level: Optional[str] = None) -> None:
    """로깅 설정"""
    level_name = (log_level or Config.LOG_LEVEL).upper()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(TranslatorFormatter())

    root_logger = logging.getLogger()

    # 반복 호출 시 이전 콘솔 핸들러 교체
    for handler in root_logger.handlers[:]:
        if isinstance(handler.formatter, TranslatorFormatter):
            root_logger.removeHandler(handler)

    root_logger.setLevel(getattr(logging, level_name, logging.INFO))
    root_logger.addHandler(console_handler)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="마인크래프트 식별자 번역")
    parser.add_argument('names', nargs='*', help='번역할 식별자 이름 (예: DIAMOND, ZOMBIE)')
    parser.add_argument('-l', '--lang', default=Config.DEFAULT_LANGUAGE,
                        help=f'언어 코드 (기본값: {Config.DEFAULT_LANGUAGE})')
    parser.add_argument('--lang-dir', default=Config.LANG_DIR,
                        help='언어 사전 디렉토리 (기본값: 패키지 내장 사전)')
    parser.add_argument('--lookup-order', default=Config.NAME_LOOKUP_ORDER,
                        help='이름 해석 카테고리 순서 (예: material,entity,effect)')
    parser.add_argument('--report', action='store_true', help='번역 커버리지 보고서 출력')
    parser.add_argument('--log-level', default=None, help='로그 레벨')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """메인 함수"""
    args = parse_args(argv)
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    registry = LanguageRegistry(
        loader=LangFileLoader(args.lang_dir),
        name_lookup_order=Config.get_name_lookup_order(args.lookup_order),
    )
    translator = registry.get_translator(args.lang)

    print(f"Current language: {translator.language_code}")
    if not translator.index.is_loaded:
        print(f"⚠️  {translator.index.load_error}")

    if args.names:
        for name in args.names:
            print(f"{name} -> {translator.translate_name(name)}")
    else:
        print("\nCommon Materials:")
        for material in EXAMPLE_MATERIALS:
            print(f"{material.name} -> {translator.translate(material)}")

        print("\nCommon Entities:")
        for entity_type in EXAMPLE_ENTITIES:
            print(f"{entity_type.name} -> {translator.translate(entity_type)}")

    if args.report:
        report = generate_coverage_report(translator)
        print(f"\nCoverage: {report['translated']}/{report['total']} "
              f"({report['completion_rate']:.1f}%)")
        for category in Category:
            stats = report['categories'][category.value]
            print(f"  {category.value}: {stats['translated']}/{stats['total']} "
                  f"({stats['completion_rate']:.1f}%)")

    logger.debug("예제 실행 완료")
    return 0


if __name__ == "__main__":
    sys.exit(main())
