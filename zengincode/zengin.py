from pathlib import Path
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Union

from . import records
from .loader import load_from_dir
from .records import Bank, Branch


class Zengin:
    """Read-only view over a loaded bank collection.

    The collection never changes after construction, so one instance can be
    shared between threads.

    >>> z = Zengin.load()
    >>> z.get_bank('0001').name
    'みずほ'
    """

    is_valid_bank_code = staticmethod(records.is_valid_bank_code)
    is_valid_branch_code = staticmethod(records.is_valid_branch_code)

    def __init__(self, banks: Mapping[str, Bank]):
        self._banks = MappingProxyType(dict(banks))

    @classmethod
    def load(cls, data_dir: Union[str, Path, None] = None, missing_branches: str = 'error') -> 'Zengin':
        return cls(load_from_dir(data_dir, missing_branches=missing_branches))

    def __len__(self):
        return len(self._banks)

    def __contains__(self, code):
        return code in self._banks

    def __iter__(self) -> Iterator[Bank]:
        return (bank for _, bank in sorted(self._banks.items()))

    def __repr__(self):
        return '<%s banks=%d>' % (type(self).__name__, len(self._banks))

    def get_bank(self, code: str) -> Optional[Bank]:
        return self._banks.get(code)

    def get_branch(self, bank: Union[Bank, str], code: str) -> Optional[Branch]:
        if not isinstance(bank, Bank):
            bank = self.get_bank(bank)
            if bank is None:
                return None
        return bank.get_branch(code)

    def find_banks_by(self, key: str, pattern: str) -> List[Bank]:
        """Banks whose ``key`` field (name, kana, hira or roma) contains a match for ``pattern``.

        The pattern is applied with :func:`re.search`, so it may match anywhere
        in the field. Results are ordered by bank code.
        Raises PatternError if ``pattern`` does not compile.
        """
        return records.find(self._banks, key, pattern)

    def find_banks_by_name(self, pattern: str) -> List[Bank]:
        return self.find_banks_by('name', pattern)

    def find_banks_by_kana(self, pattern: str) -> List[Bank]:
        return self.find_banks_by('kana', pattern)

    def find_banks_by_hira(self, pattern: str) -> List[Bank]:
        return self.find_banks_by('hira', pattern)

    def find_banks_by_roma(self, pattern: str) -> List[Bank]:
        return self.find_banks_by('roma', pattern)

    def find_branches_by(self, bank: Union[Bank, str], key: str, pattern: str) -> List[Branch]:
        if not isinstance(bank, Bank):
            bank = self.get_bank(bank)
            if bank is None:
                return records.find({}, key, pattern)
        return bank.find_branches_by(key, pattern)

    def find_branches_by_name(self, bank: Union[Bank, str], pattern: str) -> List[Branch]:
        return self.find_branches_by(bank, 'name', pattern)

    def find_branches_by_kana(self, bank: Union[Bank, str], pattern: str) -> List[Branch]:
        return self.find_branches_by(bank, 'kana', pattern)

    def find_branches_by_hira(self, bank: Union[Bank, str], pattern: str) -> List[Branch]:
        return self.find_branches_by(bank, 'hira', pattern)

    def find_branches_by_roma(self, bank: Union[Bank, str], pattern: str) -> List[Branch]:
        return self.find_branches_by(bank, 'roma', pattern)

    def all_banks(self) -> Mapping[str, Bank]:
        return self._banks
