# -*- coding: utf-8 -*-
"""
식별자 카탈로그 - 카테고리별 게임 오브젝트 열거 어댑터
"""

from enum import Enum
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Type


class Category(Enum):
    """번역 대상 카테고리"""
    MATERIAL = "material"          # 블록/아이템
    ENTITY = "entity"              # 엔티티
    EFFECT = "effect"              # 포션 효과
    ENCHANTMENT = "enchantment"    # 인챈트

    @classmethod
    def from_name(cls, name: str) -> Optional['Category']:
        """이름(대소문자 무시)으로 카테고리 조회, 없으면 None"""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            return None

        key = name.strip().lower()
        for category in cls:
            if category.value == key:
                return category
        return None


class IdentifierCatalog:
    """
    한 카테고리의 식별자 집합을 감싸는 기본 카탈로그

    하위 클래스는 members/canonical_name/key_name/try_parse 를 구현합니다.
    """

    def __init__(self, category: Category):
        self.category = category

    def members(self) -> Iterable[Any]:
        """카테고리의 모든 식별자"""
        raise NotImplementedError

    def canonical_name(self, identifier: Any) -> str:
        """번역이 없을 때 반환되는 식별자 고유 문자열"""
        raise NotImplementedError

    def key_name(self, identifier: Any) -> str:
        """사전 키 생성에 사용되는 이름 (소문자 변환 전)"""
        return self.canonical_name(identifier)

    def try_parse(self, name: str) -> Optional[Any]:
        """문자열을 식별자로 해석, 실패 시 None"""
        raise NotImplementedError

    def contains(self, identifier: Any) -> bool:
        """식별자가 이 카탈로그에 속하는지 확인"""
        raise NotImplementedError

    def __iter__(self) -> Iterator[Any]:
        return iter(self.members())

    def __len__(self) -> int:
        return sum(1 for _ in self.members())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.category.value})"


class EnumCatalog(IdentifierCatalog):
    """Enum 클래스를 카탈로그로 사용하는 어댑터"""

    def __init__(self, category: Category, enum_cls: Type[Enum],
                 canonical: Optional[Callable[[Enum], str]] = None,
                 aliases: Optional[Callable[[Enum], Iterable[str]]] = None):
        """
        EnumCatalog 초기화

        Args:
            category: 카테고리
            enum_cls: 식별자 Enum 클래스
            canonical: 고유 문자열 함수 (기본값: 멤버 심볼)
            aliases: 심볼 외에 해석을 허용할 추가 이름 함수
        """
        super().__init__(category)
        self.enum_cls = enum_cls
        self._canonical = canonical or (lambda member: member.name)

        # 대문자 이름 -> 멤버 (심볼이 별칭보다 우선)
        self._lookup: Dict[str, Enum] = {}
        if aliases:
            for member in enum_cls:
                for alias in aliases(member):
                    self._lookup.setdefault(alias.upper(), member)
        for member in enum_cls:
            self._lookup[member.name.upper()] = member

    def members(self) -> List[Enum]:
        return list(self.enum_cls)

    def canonical_name(self, identifier: Enum) -> str:
        return self._canonical(identifier)

    def try_parse(self, name: str) -> Optional[Enum]:
        if not isinstance(name, str):
            return None
        return self._lookup.get(name.upper())

    def contains(self, identifier: Any) -> bool:
        return isinstance(identifier, self.enum_cls)

    def __len__(self) -> int:
        return len(self.enum_cls)


class CatalogSet:
    """카테고리별 카탈로그 묶음"""

    def __init__(self, catalogs: Iterable[IdentifierCatalog]):
        self._catalogs: Dict[Category, IdentifierCatalog] = {}
        for catalog in catalogs:
            self._catalogs[catalog.category] = catalog

        missing = [c.value for c in Category if c not in self._catalogs]
        if missing:
            raise ValueError(f"카탈로그가 누락된 카테고리: {', '.join(missing)}")

    def get(self, category: Category) -> IdentifierCatalog:
        """카테고리의 카탈로그 반환"""
        return self._catalogs[category]

    def category_of(self, identifier: Any) -> Optional[Category]:
        """식별자가 속한 카테고리 (없으면 None)"""
        for category, catalog in self._catalogs.items():
            if catalog.contains(identifier):
                return category
        return None

    def __iter__(self) -> Iterator[IdentifierCatalog]:
        return iter(self._catalogs.values())

    def __getitem__(self, category: Category) -> IdentifierCatalog:
        return self.get(category)
