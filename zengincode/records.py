import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional

from .errors import PatternError

SEARCH_FIELDS = ('name', 'kana', 'hira', 'roma')

_BANK_CODE = re.compile(r'[0-9]{4}')
_BRANCH_CODE = re.compile(r'[0-9]{3}')


def is_valid_bank_code(code) -> bool:
    return isinstance(code, str) and _BANK_CODE.fullmatch(code) is not None


def is_valid_branch_code(code) -> bool:
    return isinstance(code, str) and _BRANCH_CODE.fullmatch(code) is not None


def find(records, key: str, pattern: str) -> list:
    if key not in SEARCH_FIELDS:
        raise ValueError('%r is not a searchable field, expected one of %s' % (key, ', '.join(SEARCH_FIELDS)))
    try:
        p = re.compile(pattern)
    except re.error as e:
        raise PatternError(pattern, e) from e
    return [r for _, r in sorted(records.items()) if p.search(getattr(r, key))]


@dataclass(frozen=True)
class Branch:
    code: str
    name: str
    kana: str
    hira: str
    roma: str


@dataclass(frozen=True)
class Bank:
    code: str
    name: str
    kana: str
    hira: str
    roma: str
    branches: Mapping[str, Branch] = field(default_factory=lambda: MappingProxyType({}), compare=False, repr=False)

    def get_branch(self, code: str) -> Optional[Branch]:
        return self.branches.get(code)

    def find_branches_by(self, key: str, pattern: str) -> List[Branch]:
        """Branches whose ``key`` field contains a match for ``pattern``, ordered by code.

        Raises PatternError if ``pattern`` does not compile.
        """
        return find(self.branches, key, pattern)

    def find_branches_by_name(self, pattern: str) -> List[Branch]:
        return self.find_branches_by('name', pattern)

    def find_branches_by_kana(self, pattern: str) -> List[Branch]:
        return self.find_branches_by('kana', pattern)

    def find_branches_by_hira(self, pattern: str) -> List[Branch]:
        return self.find_branches_by('hira', pattern)

    def find_branches_by_roma(self, pattern: str) -> List[Branch]:
        return self.find_branches_by('roma', pattern)

    def all_branches(self) -> Mapping[str, Branch]:
        return self.branches
